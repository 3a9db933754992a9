"""
Начальная инициализация центроидов для скриптового k-means.
"""

from __future__ import annotations

import numpy as np


def random_init(X: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Выбирает k различных точек данных в качестве центроидов."""
    idx = rng.choice(X.shape[0], size=k, replace=False)
    return X[idx].copy()


def kmeans_plus_plus(X: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """
    Инициализация k-means++.

    Первый центроид выбирается равновероятно, каждый следующий — с
    вероятностью, пропорциональной квадрату расстояния до ближайшего
    уже выбранного центроида.
    """
    N = X.shape[0]
    centroids = np.empty((k, X.shape[1]), dtype=np.float64)
    centroids[0] = X[rng.integers(N)]

    diff = X - centroids[0]
    closest = np.sum(diff * diff, axis=1)

    for j in range(1, k):
        total = closest.sum()
        if total > 0:
            pick = rng.choice(N, p=closest / total)
        else:
            # Все точки совпадают с выбранными центроидами
            pick = rng.integers(N)
        centroids[j] = X[pick]
        diff = X - centroids[j]
        closest = np.minimum(closest, np.sum(diff * diff, axis=1))

    return centroids
