"""Frame clock and FrameContext for the fixed-timestep loop.

Time is measured in milliseconds. The clock also holds the backlog of real
time that has been fed in but not yet spent on whole frames.
"""

from typing import Callable

from glide.types import FrameContext


class FrameClock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1000.0 / fps
        self._frame_number = 0
        self._backlog = 0.0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._frame_number * self._dt

    @property
    def backlog(self) -> float:
        return self._backlog

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def accumulate(self, elapsed_ms: float) -> None:
        if elapsed_ms < 0:
            raise ValueError("elapsed time cannot be negative")
        self._backlog += elapsed_ms

    def consume(self) -> bool:
        """Spend one frame of backlog. Returns False if less than a frame is left."""
        if self._backlog < self._dt:
            return False
        self._backlog -= self._dt
        return True

    def discard(self) -> None:
        self._backlog = 0.0

    def context(self, teardown_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_teardown=teardown_fn,
        )
