"""Pulse motion: a phase that oscillates 0 -> 1 -> 0 forever."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from glide_tween import Tween

if TYPE_CHECKING:
    from glide import FrameContext


@dataclass
class PulseState:
    """Phase in [0, 1] plus the linear maps the halo is drawn with."""

    phase: float = 0.0
    rising: bool = True
    turns: int = 0
    scale_gain: float = 0.25
    base_opacity: float = 0.6

    @property
    def scale(self) -> float:
        return 1.0 + self.scale_gain * self.phase

    @property
    def opacity(self) -> float:
        return self.base_opacity * (1.0 - self.phase)


class PulseMotion:
    def __init__(
        self,
        half_period: float = 2000.0,
        scale_gain: float = 0.25,
        base_opacity: float = 0.6,
        on_turn: Callable[[PulseState], None] | None = None,
    ) -> None:
        if half_period <= 0:
            raise ValueError("half_period must be positive")
        self._half_period = half_period
        self._on_turn = on_turn
        self._stopped = False
        self.state = PulseState(scale_gain=scale_gain, base_opacity=base_opacity)
        self._tween = Tween(0.0, 1.0, half_period)

    @property
    def stopped(self) -> bool:
        return self._stopped

    def advance(self, dt: float) -> None:
        if self._stopped:
            return
        state = self.state
        state.phase = self._tween.advance(dt)
        if not self._tween.done:
            return
        state.rising = not state.rising
        state.turns += 1
        end = 1.0 if state.rising else 0.0
        self._tween = Tween(state.phase, end, self._half_period)
        if self._on_turn is not None:
            self._on_turn(state)

    def stop(self) -> None:
        self._stopped = True


def make_pulse_system(pulse: PulseMotion) -> Callable[[FrameContext], None]:
    def pulse_system(ctx: FrameContext) -> None:
        pulse.advance(ctx.dt)

    return pulse_system
