"""A simple countdown timer measured against a clock."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Timer:
    """Tracks when it was started and how long it should run."""

    start_time: float = 0.0
    lifetime: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def start(self, lifetime: float) -> None:
        """Start (or restart) the timer to run for ``lifetime`` seconds."""
        self.start_time = self.clock()
        self.lifetime = lifetime

    def done(self) -> bool:
        """Return whether the lifetime has passed since the timer started."""
        return self.clock() - self.start_time >= self.lifetime

    def elapsed(self) -> float:
        """Return the seconds passed since the timer started."""
        return self.clock() - self.start_time