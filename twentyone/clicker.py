"""A timed clicking round that earns coins."""

from __future__ import annotations

import time
from typing import Callable

ROUND_SECONDS = 30


def reward_for_clicks(clicks: int) -> int:
    """Coins earned for the given number of clicks."""
    if clicks < 0:
        raise ValueError(f"clicks must not be negative, got {clicks}")
    if clicks >= 120:
        return 60 + (clicks - 50) * 2
    if clicks >= 90:
        return 25
    if clicks >= 60:
        return 5
    return 0


class ClickerSession:
    """Counts clicks until the round's time runs out."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        duration: int = ROUND_SECONDS,
    ) -> None:
        self._clock = clock
        self._start = clock()
        self.duration = duration
        self._clicks = 0
        self._finished = False

    def _elapsed(self) -> float:
        return self._clock() - self._start

    @property
    def clicks(self) -> int:
        return self._clicks

    @property
    def reward(self) -> int:
        return reward_for_clicks(self._clicks)

    def click(self) -> int:
        """Count a click; the one that comes at the deadline still counts."""
        if self._finished:
            raise RuntimeError("the clicking round is over")
        self._clicks += 1
        if self._elapsed() >= self.duration:
            self._finished = True
        return self._clicks

    def remaining_time(self) -> int:
        """Whole seconds left in the round."""
        return max(0, self.duration - int(self._elapsed()))

    def is_over(self) -> bool:
        if not self._finished and self._elapsed() >= self.duration:
            self._finished = True
        return self._finished

    def summary(self) -> str:
        return f"Вы сделали {self._clicks} кликов.\nНаграда: {self.reward} монет 🪙"