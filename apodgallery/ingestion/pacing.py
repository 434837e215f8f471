"""Politeness policies applied between detail-page requests."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


# A pacing policy is any zero-argument callable invoked once per hydration.
Pacer = Callable[[], None]


@dataclass(frozen=True)
class FixedDelay:
    milliseconds: int = 350

    def __call__(self) -> None:
        time.sleep(max(0, self.milliseconds) / 1000.0)


def no_delay() -> None:
    return None


def pacer_for(milliseconds: int) -> Pacer:
    if milliseconds <= 0:
        return no_delay
    return FixedDelay(milliseconds)
