from .timers import Timer
from .harness import measure
from .metrics import speedup

__all__ = [
    "Timer",
    "measure",
    "speedup",
]
