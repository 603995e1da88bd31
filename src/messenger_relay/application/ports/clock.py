from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Current time as Unix seconds."""
        ...


class SystemClock:
    """Default wall-clock implementation."""

    def now(self) -> int:
        return int(time.time())
