"""
Обобщённый цикл замеров: вызывает функцию заданное число раз и усредняет время.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from kmbench.metrics.timers import Timer


def _exceeds_one(result: Any) -> bool:
    """Отладочная проверка «результат > 1» для скалярных результатов."""
    try:
        return float(result) > 1
    except (TypeError, ValueError, OverflowError):
        # Результат кластеризации обычно не приводится к числу
        return False


def measure(
    fn: Callable[..., Any],
    repetitions: int,
    *args: Any,
    logger: logging.Logger | None = None,
) -> float:
    """
    Замеряет среднее время вызова ``fn(*args)``.

    Функция вызывается ровно ``repetitions`` раз с одними и теми же
    объектами аргументов. Копии аргументов не создаются: если алгоритм
    изменяет вход на месте, следующие повторы увидят изменённые данные.
    Исключения из ``fn`` не перехватываются.

    Args:
        fn: Замеряемая функция
        repetitions: Количество вызовов (>= 1)
        *args: Аргументы, передаваемые в каждый вызов
        logger: Логгер для отладочного вывода

    Returns:
        Среднее время одного вызова в миллисекундах

    Raises:
        ValueError: Если repetitions меньше 1
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be >= 1, got {repetitions}")

    total_ms = 0.0
    for _ in range(repetitions):
        with Timer() as t:
            result = fn(*args)
        if logger and _exceeds_one(result):
            logger.debug(f"Result above one: {result!r}")
        total_ms += t.elapsed_ms

    return total_ms / repetitions
