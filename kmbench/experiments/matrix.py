from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from kmbench.data.generator import generate


@dataclass(frozen=True, eq=False)
class TestCase:
    """Один тестовый случай: число кластеров, размерность и свой датасет."""

    __test__ = False  # не коллектится pytest

    k: int
    dimensions: int
    data: np.ndarray


@dataclass(frozen=True)
class TestResult:
    """Среднее время (мс) одного кандидата на одном тестовом случае."""

    __test__ = False

    k: int
    dimensions: int
    average_time: float


def build_matrix(
    k_values: Sequence[int],
    dimension_values: Sequence[int],
    data_size: int,
    rng: np.random.Generator | None = None,
) -> List[TestCase]:
    """
    Строит плоский список тестовых случаев K × D.

    Порядок: внешний цикл по k, внутренний по размерности. Для каждой пары
    генерируется независимый датасет из ``data_size`` точек; дубликаты во
    входных последовательностях дают дубликаты случаев.
    """
    if rng is None:
        rng = np.random.default_rng()

    return [
        TestCase(k=k, dimensions=d, data=generate(data_size, d, rng))
        for k in k_values
        for d in dimension_values
    ]
