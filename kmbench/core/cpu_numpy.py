# core/cpu_numpy.py
from __future__ import annotations

from typing import Any

import numpy as np

from .base import KMeansBase
from .result import KMeansResult
from .seeding import kmeans_plus_plus, random_init


class KMeansCPUNumpy(KMeansBase):
    """Простая однопоточная реализация KMeans на NumPy."""

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        # (N, K, D) → (N, K)
        diff = X[:, None, :] - centroids[None, :, :]
        distances = np.sum(diff * diff, axis=2)
        return np.argmin(distances, axis=1)

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> np.ndarray:
        # Пустой кластер сохраняет прежний центроид
        new_centroids = centroids.copy()

        for k in range(self.K):
            points = X[labels == k]
            if len(points) > 0:
                new_centroids[k] = points.mean(axis=0)

        return new_centroids


def _initial_centroids(
    X: np.ndarray, k: int, init: Any, rng: np.random.Generator
) -> np.ndarray:
    if init is None or (isinstance(init, str) and init == "random"):
        return random_init(X, k, rng)
    if isinstance(init, str):
        if init == "kmpp":
            return kmeans_plus_plus(X, k, rng)
        raise ValueError(f"Unknown init method: {init!r}")

    centroids = np.asarray(init, dtype=np.float64)
    if centroids.shape != (k, X.shape[1]):
        raise ValueError(
            f"Expected initial centroids shape ({k}, {X.shape[1]}), "
            f"got {centroids.shape}"
        )
    return centroids


def numpy_kmeans(
    data: Any,
    k: int,
    init: Any = None,
    max_iter: int = 100,
    tol: float = 0.0,
    rng: np.random.Generator | None = None,
) -> KMeansResult:
    """
    Кластеризация k-means, написанная целиком на Python/NumPy.

    Args:
        data: Точки, массив формы (N, D) или список списков одинаковой длины
        k: Количество кластеров (>= 2)
        init: Метод инициализации: None или "random" — k случайных точек,
            "kmpp" — k-means++, либо массив начальных центроидов формы (k, D)
        max_iter: Максимальное количество итераций (>= 1)
        tol: Порог сходимости по максимальному смещению центроида (>= 0)
        rng: Генератор случайных чисел для инициализации

    Returns:
        KMeansResult с центроидами и метками точек

    Raises:
        ValueError: При некорректных параметрах или точках разной размерности
    """
    if k < 2:
        raise ValueError("k must be greater than or equal to 2")
    if max_iter < 1:
        raise ValueError("max_iter must be greater than or equal to 1")
    if tol < 0:
        raise ValueError("tol must be non-negative")

    try:
        X = np.asarray(data, dtype=np.float64)
    except ValueError as exc:
        raise ValueError("All data points must have the same dimension") from exc
    if X.size == 0 and X.ndim < 2:
        return KMeansResult(
            iterations=0,
            k=k,
            centroids=np.empty((0, 0), dtype=np.float64),
            idxs=np.empty(0, dtype=np.int64),
        )
    if X.ndim != 2:
        raise ValueError("All data points must have the same dimension")
    if X.shape[0] == 0:
        return KMeansResult(
            iterations=0,
            k=k,
            centroids=np.empty((0, X.shape[1]), dtype=np.float64),
            idxs=np.empty(0, dtype=np.int64),
        )
    if k > X.shape[0]:
        raise ValueError(f"k={k} exceeds the number of points ({X.shape[0]})")

    if rng is None:
        rng = np.random.default_rng()

    model = KMeansCPUNumpy(n_clusters=k, n_iters=max_iter, tol=tol)
    model.fit(X, _initial_centroids(X, k, init, rng))

    return KMeansResult(
        iterations=model.n_iters_actual,
        k=k,
        centroids=model.centroids,
        idxs=model.labels,
    )
