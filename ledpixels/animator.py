"""Timing support for running several indexed animations at once."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

__all__ = ["AnimationState", "AnimationParam", "Animator"]

_UINT32 = 0xFFFFFFFF
_UINT16_MAX = 0xFFFF


class AnimationState(Enum):
    """Where an animation is in its life when its callback runs."""

    STARTED = "started"
    PROGRESS = "progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class AnimationParam:
    """What an animation callback is told on each update."""

    index: int
    state: AnimationState
    progress: float


AnimationCallback = Callable[[AnimationParam], None]


def _default_clock() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class _Slot:
    duration: int = 0
    remaining: int = 0
    callback: AnimationCallback | None = None

    def progress(self) -> float:
        if self.duration == 0:
            return 1.0
        return (self.duration - self.remaining) / self.duration

    def start(self, duration: int, callback: AnimationCallback) -> None:
        self.duration = duration
        self.remaining = duration
        self.callback = callback

    def stop(self) -> None:
        self.remaining = 0


class Animator:
    """Drives a fixed number of animation slots from a millisecond clock.

    Durations are measured in units of time_scale milliseconds.
    """

    def __init__(
        self,
        count: int,
        time_scale: int = 1,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if count < 0:
            raise ValueError(f"animation count must not be negative: {count}")
        if time_scale <= 0:
            raise ValueError(f"time scale must be positive: {time_scale}")
        self.count = count
        self.time_scale = time_scale
        self.running = True
        self._clock = clock if clock is not None else _default_clock
        self._slots = [_Slot() for _ in range(count)]
        self._last_tick = 0
        self._active = 0

    def is_active(self, index: int) -> bool:
        """True while the animation at index has time remaining."""
        return 0 <= index < self.count and self._slots[index].remaining != 0

    def active_count(self) -> int:
        """Number of animations currently running."""
        return self._active

    def next_available(self, start: int = 0) -> int | None:
        """First inactive slot searching from start and wrapping, or None."""
        if self.count == 0:
            return None
        if start >= self.count:
            start = self.count - 1
        candidate = start
        while True:
            if not self.is_active(candidate):
                return candidate
            candidate = (candidate + 1) % self.count
            if candidate == start:
                return None

    def start(self, index: int, duration: int, callback: AnimationCallback | None) -> None:
        """Start (or restart) the animation at index; invalid requests are ignored."""
        if not 0 <= index < self.count or callback is None:
            return
        if not 0 <= duration <= _UINT16_MAX:
            raise ValueError(f"duration out of range 0-{_UINT16_MAX}: {duration}")

        if self._active == 0:
            self._last_tick = self._clock()

        self.stop(index)

        # a zero duration would mean the animation is already stopped
        self._slots[index].start(max(duration, 1), callback)
        self._active += 1

    def stop(self, index: int) -> None:
        """Stop the animation at index without calling its callback."""
        if not 0 <= index < self.count:
            return
        if self.is_active(index):
            self._active -= 1
            self._slots[index].stop()

    def stop_all(self) -> None:
        """Stop every animation."""
        for slot in self._slots:
            slot.stop()
        self._active = 0

    def update(self) -> None:
        """Advance all animations by the time elapsed and run their callbacks."""
        if not self.running:
            return

        current = self._clock()
        delta = (current - self._last_tick) & _UINT32
        if delta < self.time_scale:
            return

        delta //= self.time_scale
        for index, slot in enumerate(self._slots):
            callback = slot.callback
            if slot.remaining > delta:
                state = (
                    AnimationState.STARTED
                    if slot.remaining == slot.duration
                    else AnimationState.PROGRESS
                )
                param = AnimationParam(index, state, slot.progress())
                callback(param)
                slot.remaining -= delta
            elif slot.remaining > 0:
                self._active -= 1
                slot.stop()
                callback(AnimationParam(index, AnimationState.COMPLETED, 1.0))

        self._last_tick = current

    def change_duration(self, index: int, duration: int) -> None:
        """Change an animation's duration, keeping its current progress."""
        if not 0 <= index < self.count:
            return
        if not 0 <= duration <= _UINT16_MAX:
            raise ValueError(f"duration out of range 0-{_UINT16_MAX}: {duration}")

        slot = self._slots[index]
        progress = min(max(slot.progress(), 0.0), 1.0)
        slot.duration = duration
        slot.remaining = int(duration * (1.0 - progress)) & _UINT16_MAX