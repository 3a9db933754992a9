"""
Вывод результатов бенчмарка в консоль.

Таблицы оформляются в духе ``console.table``: столбец ``(index)`` и далее
``k``, ``dimensions``, ``averageTime``.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Sequence, TextIO

from kmbench.candidates import NATIVE_LABEL
from kmbench.experiments.matrix import TestResult

COLUMNS = ("(index)", "k", "dimensions", "averageTime")


def _rows(results: Sequence[TestResult]) -> List[List[str]]:
    return [
        [str(i), str(r.k), str(r.dimensions), repr(float(r.average_time))]
        for i, r in enumerate(results)
    ]


def format_table(results: Sequence[TestResult]) -> str:
    """Рендерит список TestResult в текстовую таблицу с рамкой."""
    rows = _rows(results)
    widths = [
        max([len(col)] + [len(row[i]) for row in rows]) + 2
        for i, col in enumerate(COLUMNS)
    ]

    def line(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * w for w in widths) + right

    def cells(values: Sequence[str]) -> str:
        return "│" + "│".join(v.center(w) for v, w in zip(values, widths)) + "│"

    out = [line("┌", "┬", "┐"), cells(COLUMNS), line("├", "┼", "┤")]
    out.extend(cells(row) for row in rows)
    out.append(line("└", "┴", "┘"))
    return "\n".join(out)


def print_banner(version: str, stream: TextIO | None = None) -> None:
    """Печатает строку версии нативного кандидата."""
    print(version, file=stream or sys.stdout)


def print_report(
    config_summary: Dict[str, Any],
    script_name: str,
    script_results: Sequence[TestResult],
    native_results: Sequence[TestResult],
    stream: TextIO | None = None,
) -> None:
    """
    Печатает сводку конфигурации и обе таблицы результатов.

    Порядок: сводка, имя скриптового кандидата, его таблица, метка
    ``kmeans``, таблица нативного кандидата.
    """
    stream = stream or sys.stdout
    print(config_summary, file=stream)
    print(script_name, file=stream)
    print(format_table(script_results), file=stream)
    print(NATIVE_LABEL, file=stream)
    print(format_table(native_results), file=stream)
