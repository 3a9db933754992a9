"""
Метрики для сравнения кандидатов между собой.
"""

from __future__ import annotations


def speedup(t_reference: float, t_candidate: float) -> float:
    """
    Вычисляет ускорение кандидата относительно эталонной реализации.

    Args:
        t_reference: Время выполнения эталонной реализации
        t_candidate: Время выполнения сравниваемой реализации

    Returns:
        Значение ускорения (speedup = t_reference / t_candidate)

    Raises:
        ZeroDivisionError: Если t_candidate равно нулю
    """
    if t_candidate == 0:
        raise ZeroDivisionError("Candidate time cannot be zero")
    return t_reference / t_candidate
