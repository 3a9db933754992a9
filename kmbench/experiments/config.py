from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Параметры сетки замеров по умолчанию

K_VALUES: Tuple[int, ...] = (2, 10, 50)
DIMENSION_VALUES: Tuple[int, ...] = (3, 10, 50)
DATA_SIZE: int = 10_000
MAX_ITERATIONS: int = 100
REPEATS: int = 10


@dataclass(frozen=True)
class BenchmarkConfig:
    """Сетка (K × D) и константы одного запуска бенчмарка."""

    k_values: Tuple[int, ...] = K_VALUES
    dimension_values: Tuple[int, ...] = DIMENSION_VALUES
    data_size: int = DATA_SIZE
    max_iterations: int = MAX_ITERATIONS
    repeats: int = REPEATS

    def __post_init__(self) -> None:
        for name in ("data_size", "max_iterations", "repeats"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if any(k < 2 for k in self.k_values):
            raise ValueError(f"k values must be >= 2: {self.k_values}")
        if any(d < 1 for d in self.dimension_values):
            raise ValueError(
                f"dimension values must be positive: {self.dimension_values}"
            )

    def summary(self) -> Dict[str, Any]:
        """Краткая сводка конфигурации для отчёта."""
        return {"dataSize": self.data_size, "maxIterations": self.max_iterations}
