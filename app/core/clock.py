"""Wall clock in epoch milliseconds. Injected wherever progress logic reads time."""
import time
from typing import Callable

Clock = Callable[[], int]


def now_ms() -> int:
    return int(time.time() * 1000)
