# main.py
from __future__ import annotations

import argparse
import logging
from typing import List, Sequence

from kmbench.candidates import NATIVE_VERSION, SCRIPT_NAME
from kmbench.experiments.config import (
    DATA_SIZE,
    DIMENSION_VALUES,
    K_VALUES,
    MAX_ITERATIONS,
    REPEATS,
    BenchmarkConfig,
)
from kmbench.experiments.matrix import build_matrix
from kmbench.experiments.runner import BenchmarkResults, BenchmarkRunner
from kmbench.metrics.metrics import speedup
from kmbench.reporting import print_banner, print_report
from kmbench.utils.logging import setup_logger


def _int_list(value: str) -> List[int]:
    try:
        return [int(v) for v in value.split(",") if v.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated integers, got {value!r}"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmbench",
        description="Сравнение времени работы sklearn KMeans и k-means на NumPy.",
    )
    parser.add_argument(
        "--k-values",
        type=_int_list,
        default=list(K_VALUES),
        help="Значения k через запятую (по умолчанию 2,10,50).",
    )
    parser.add_argument(
        "--dimensions",
        type=_int_list,
        default=list(DIMENSION_VALUES),
        help="Размерности через запятую (по умолчанию 3,10,50).",
    )
    parser.add_argument(
        "--data-size",
        type=int,
        default=DATA_SIZE,
        help="Количество точек в каждом датасете.",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=MAX_ITERATIONS,
        help="Лимит итераций для обоих кандидатов.",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=REPEATS,
        help="Количество замеров на каждый тестовый случай.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Подробный (DEBUG) вывод логов.",
    )
    return parser


def log_speedups(results: BenchmarkResults, logger: logging.Logger) -> None:
    """Логирует ускорение нативного кандидата относительно скриптового."""
    for script_res, native_res in zip(results.script, results.native):
        if native_res.average_time == 0:
            continue
        s = speedup(script_res.average_time, native_res.average_time)
        logger.info(
            f"[k={script_res.k} D={script_res.dimensions}] "
            f"native speedup x{s:.2f}"
        )


def run(
    config: BenchmarkConfig, logger: logging.Logger | None = None
) -> BenchmarkResults:
    """Полный прогон: версия, матрица, замеры обоих кандидатов, отчёт."""
    print_banner(NATIVE_VERSION)

    matrix = build_matrix(
        config.k_values, config.dimension_values, config.data_size
    )
    if logger:
        logger.info(f"Built {len(matrix)} test cases")

    runner = BenchmarkRunner(
        repeats=config.repeats,
        max_iterations=config.max_iterations,
        logger=logger,
    )
    results = runner.run_all(matrix)

    print_report(config.summary(), SCRIPT_NAME, results.script, results.native)
    if logger:
        log_speedups(results, logger)
    return results


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logger = setup_logger(logging.DEBUG if args.verbose else logging.INFO)

    config = BenchmarkConfig(
        k_values=tuple(args.k_values),
        dimension_values=tuple(args.dimensions),
        data_size=args.data_size,
        max_iterations=args.max_iterations,
        repeats=args.repeats,
    )
    run(config, logger=logger)


if __name__ == "__main__":
    main()
