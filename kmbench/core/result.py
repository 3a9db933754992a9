from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class KMeansResult:
    """
    Результат кластеризации скриптовым k-means.

    Attributes:
        iterations: Количество выполненных итераций
        k: Количество кластеров
        centroids: Центроиды, форма (k, D)
        idxs: Индекс центроида для каждой точки входных данных, форма (N,)
    """

    iterations: int
    k: int
    centroids: np.ndarray
    idxs: np.ndarray

    def test(
        self,
        point: np.ndarray,
        distance: Optional[Callable[[np.ndarray, np.ndarray], float]] = None,
    ) -> int:
        """
        Возвращает индекс ближайшего центроида для новой точки.

        По умолчанию используется квадрат евклидова расстояния.
        """
        point = np.asarray(point, dtype=np.float64)
        if point.shape != (self.centroids.shape[1],):
            raise ValueError("Point should have the same length as centroid")
        if distance is None:
            diff = self.centroids - point[None, :]
            return int(np.argmin(np.sum(diff * diff, axis=1)))
        return int(np.argmin([distance(point, c) for c in self.centroids]))
