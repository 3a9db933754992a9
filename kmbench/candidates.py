"""
Кандидаты бенчмарка.

Оба алгоритма приводятся к единой сигнатуре ``(data, k, max_iterations)``:

- ``native_kmeans`` — KMeans из scikit-learn (скомпилированное ядро);
- ``script_kmeans`` — k-means на чистом Python/NumPy из ``kmbench.core``.
"""

from __future__ import annotations

import numpy as np
import sklearn
from sklearn.cluster import KMeans

from kmbench.core import KMeansResult, numpy_kmeans

NATIVE_VERSION: str = sklearn.__version__
NATIVE_LABEL = "kmeans"
SCRIPT_NAME: str = numpy_kmeans.__name__


def native_kmeans(data: np.ndarray, k: int, max_iterations: int) -> KMeans:
    """Обучает sklearn KMeans с одной случайной инициализацией."""
    model = KMeans(
        n_clusters=k,
        init="random",
        n_init=1,
        max_iter=max_iterations,
    )
    return model.fit(data)


def script_kmeans(data: np.ndarray, k: int, max_iterations: int) -> KMeansResult:
    # Слот метода инициализации не используется: берётся значение по умолчанию
    return numpy_kmeans(data, k, None, max_iterations)
