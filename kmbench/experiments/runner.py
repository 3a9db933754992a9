import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from kmbench.candidates import native_kmeans, script_kmeans
from kmbench.experiments.config import MAX_ITERATIONS, REPEATS
from kmbench.experiments.matrix import TestCase, TestResult
from kmbench.metrics.harness import measure
from kmbench.utils.logging import format_case_prefix

Candidate = Callable[[Any, int, int], Any]


@dataclass(frozen=True)
class BenchmarkResults:
    """Результаты обоих кандидатов в порядке матрицы."""

    script: List[TestResult]
    native: List[TestResult]


class BenchmarkRunner:
    """
    Запускает кандидатов на каждом тестовом случае матрицы.

    Ошибки кандидатов не перехватываются: запуск прерывается целиком,
    частичные результаты не возвращаются.
    """

    def __init__(
        self,
        repeats: int = REPEATS,
        max_iterations: int = MAX_ITERATIONS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.repeats = repeats
        self.max_iterations = max_iterations
        self.logger = logger

    def run(
        self,
        candidate: Candidate,
        matrix: Sequence[TestCase],
        name: str | None = None,
    ) -> List[TestResult]:
        """
        Замеряет одного кандидата на всех случаях матрицы.

        :param candidate: функция с сигнатурой (data, k, max_iterations)
        :param matrix: тестовые случаи в порядке построения
        :param name: имя кандидата для логов
        :return: список TestResult в порядке matrix
        """
        name = name or getattr(candidate, "__name__", repr(candidate))
        results: List[TestResult] = []

        for case in matrix:
            prefix = format_case_prefix(
                {"k": case.k, "dimensions": case.dimensions, "size": len(case.data)}
            )
            if self.logger:
                self.logger.info(f"{prefix} {name} x{self.repeats}")

            avg_ms = measure(
                candidate,
                self.repeats,
                case.data,
                case.k,
                self.max_iterations,
                logger=self.logger,
            )
            results.append(
                TestResult(k=case.k, dimensions=case.dimensions, average_time=avg_ms)
            )

            if self.logger:
                self.logger.info(f"{prefix} {name} avg={avg_ms:.3f}ms")

        return results

    def run_all(self, matrix: Sequence[TestCase]) -> BenchmarkResults:
        """Запускает оба кандидата: сначала скриптовый, затем нативный."""
        script = self.run(script_kmeans, matrix)
        native = self.run(native_kmeans, matrix)
        return BenchmarkResults(script=script, native=native)
