"""Injectable transient-failure strategies for the search backend."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class FailureStrategy(Protocol):
    def should_fail(self) -> bool: ...


class RandomFailure:
    """Fails with probability ``rate`` using its own RNG."""

    def __init__(self, rate: float, *, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._rng = rng or random.Random(seed)

    def should_fail(self) -> bool:
        if self.rate <= 0.0:
            return False
        if self.rate >= 1.0:
            return True
        return self._rng.random() < self.rate


class NeverFail:
    def should_fail(self) -> bool:
        return False


class AlwaysFail:
    def should_fail(self) -> bool:
        return True
