"""FrameLoop - fixed-timestep update cycle with mount/teardown lifecycle."""

from glide.clock import FrameClock
from glide.types import Hook, LoopDisposedError, System


class FrameLoop:
    def __init__(self, fps: int = 60) -> None:
        self._clock = FrameClock(fps)
        self._systems: list[System] = []
        self._teardown_hooks: list[Hook] = []
        self._mounted: bool = False
        self._disposed: bool = False

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_system(self, system: System) -> None:
        if self._disposed:
            raise LoopDisposedError("Cannot add a system to a torn-down loop")
        self._systems.append(system)

    def on_teardown(self, hook: Hook) -> None:
        self._teardown_hooks.append(hook)

    def mount(self) -> None:
        """Start delivering frames. A torn-down loop cannot be mounted again."""
        if self._disposed:
            raise LoopDisposedError("Cannot mount a torn-down loop")
        self._mounted = True

    def teardown(self) -> None:
        """Stop the loop for good.

        Systems are dropped before teardown hooks run, and a teardown requested
        from inside a system skips the remaining systems of that frame.
        """
        if self._disposed:
            return
        self._disposed = True
        self._mounted = False
        self._clock.discard()
        self._systems.clear()
        ctx = self._clock.context(self.teardown)
        for hook in self._teardown_hooks:
            hook(ctx)

    def _frame(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self.teardown)
        for system in list(self._systems):
            system(ctx)
            if self._disposed:
                break

    def step(self) -> bool:
        """Run one frame. Returns False when the loop is not delivering frames."""
        if not self._mounted:
            return False
        self._frame()
        return True

    def run(self, n: int) -> int:
        frames = 0
        for _ in range(n):
            if not self.step():
                break
            frames += 1
        return frames

    def feed(self, elapsed_ms: float) -> int:
        """Accumulate real elapsed time and run every whole frame that fits."""
        if not self._mounted:
            return 0
        self._clock.accumulate(elapsed_ms)
        frames = 0
        while self._mounted and self._clock.consume():
            self._frame()
            frames += 1
        return frames
