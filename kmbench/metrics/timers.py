"""
Высокоточные таймеры для измерения производительности.

Модуль предоставляет контекстный менеджер Timer для измерения времени
выполнения участков кода с использованием time.perf_counter().
"""
from __future__ import annotations
import time
from typing import Any


class Timer:
    """
    Контекстный менеджер для измерения времени выполнения кода.

    Пример использования:
        with Timer() as t:
            candidate(data, k, max_iterations)
        elapsed_ms = t.elapsed_ms
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        # Исключение внутри блока не подавляется: __exit__ возвращает None
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start

    @property
    def elapsed_ms(self) -> float:
        """Прошедшее время в миллисекундах."""
        return self.elapsed * 1000.0
