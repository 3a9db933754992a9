"""
Генерация синтетических датасетов для замеров.

Точки равномерно распределены в единичном гиперкубе [0, 1)^D; структура
кластеров не задаётся, так как бенчмарк измеряет только время.
"""

from __future__ import annotations

import numpy as np


def generate(
    size: int,
    dimensions: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Создаёт датасет из ``size`` точек размерности ``dimensions``.

    Args:
        size: Количество точек
        dimensions: Размерность каждой точки
        rng: Генератор случайных чисел; если не задан, создаётся новый
            генератор без seed

    Returns:
        Массив float64 формы (size, dimensions) со значениями из [0, 1)
    """
    if rng is None:
        rng = np.random.default_rng()
    return rng.random((size, dimensions), dtype=np.float64)
