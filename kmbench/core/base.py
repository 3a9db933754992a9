from abc import ABC, abstractmethod

import numpy as np


class KMeansBase(ABC):
    """
    Базовый класс для реализаций KMeans.

    Отвечает за цикл итераций Ллойда и критерий остановки; шаги назначения
    и обновления центроидов реализуют наследники.
    """

    def __init__(
        self,
        n_clusters: int,
        n_iters: int = 100,
        tol: float = 0.0,
    ):
        self.K = n_clusters
        self.n_iters = n_iters
        self.tol = tol  # Порог сходимости (максимальное смещение центроида)

        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None

        # Реальное количество выполненных итераций
        self.n_iters_actual: int = 0

    def fit(self, X: np.ndarray, initial_centroids: np.ndarray) -> None:
        """
        Основной цикл KMeans с остановкой по сходимости.

        Алгоритм останавливается, когда:
        - Максимальное смещение центроидов не превышает tol, ИЛИ
        - Достигнуто максимальное количество итераций (n_iters)

        Входной массив X не изменяется.
        """
        self.centroids = np.array(initial_centroids, dtype=np.float64, copy=True)
        self.n_iters_actual = 0

        for i in range(self.n_iters):
            self.labels = self.assign_clusters(X, self.centroids)
            new_centroids = self.update_centroids(X, self.labels, self.centroids)
            self.n_iters_actual = i + 1

            max_change = float(np.max(np.abs(new_centroids - self.centroids)))
            self.centroids = new_centroids

            # Ранний выход при сходимости
            if max_change <= self.tol:
                break

        # Метки должны соответствовать финальным центроидам
        self.labels = self.assign_clusters(X, self.centroids)

    @abstractmethod
    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Шаг назначения точек кластерам."""
        raise NotImplementedError

    @abstractmethod
    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> np.ndarray:
        """Шаг обновления центроидов по присвоенным меткам."""
        raise NotImplementedError
