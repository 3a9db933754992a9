"""
Общие фикстуры для всех тестов.
"""

import logging

import numpy as np
import pytest

from kmbench.experiments.matrix import TestResult


@pytest.fixture
def rng():
    """Фикстура с детерминированным генератором случайных чисел."""
    return np.random.default_rng(42)


@pytest.fixture
def small_dataset(rng):
    """Фикстура с небольшим тестовым датасетом (2D, 2 кластера)."""
    # Два явно разделённых кластера
    cluster1 = rng.standard_normal((30, 2)) + [0, 0]
    cluster2 = rng.standard_normal((30, 2)) + [10, 10]
    X = np.vstack([cluster1, cluster2])
    initial_centroids = np.array([
        [-1.0, -1.0],
        [11.0, 11.0],
    ])
    return X, initial_centroids


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    initial_centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, initial_centroids


@pytest.fixture
def sample_results():
    """Фикстура с результатами замеров для тестов отчёта."""
    return [
        TestResult(k=2, dimensions=3, average_time=1.5),
        TestResult(k=2, dimensions=10, average_time=12.25),
        TestResult(k=10, dimensions=3, average_time=0.0),
    ]


@pytest.fixture
def clean_kmbench_logger():
    """Снимает обработчики логгера ``kmbench`` после теста."""
    logger = logging.getLogger("kmbench")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
