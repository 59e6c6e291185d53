"""Tween and Parallel components."""
from __future__ import annotations

from dataclasses import dataclass

from glide_tween.easing import resolve

# Tolerance for float frame durations that never sum exactly (e.g. 1000 / 60).
_EPSILON = 1e-9


@dataclass
class Tween:
    """Interpolates ``start_val`` to ``end_val`` over ``duration`` ms.

    Overshoot past ``duration`` is discarded; a finished tween reports
    exactly ``end_val``.
    """

    start_val: float
    end_val: float
    duration: float
    elapsed: float = 0.0
    easing: str = "linear"

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        resolve(self.easing)

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration - _EPSILON

    @property
    def progress(self) -> float:
        if self.done:
            return 1.0
        return self.elapsed / self.duration

    def value(self) -> float:
        if self.done:
            return self.end_val
        eased_t = resolve(self.easing)(self.progress)
        return self.start_val + (self.end_val - self.start_val) * eased_t

    def advance(self, dt: float) -> float:
        self.elapsed = min(self.elapsed + dt, self.duration)
        return self.value()


class Parallel:
    """Named tweens advanced together; done only when every tween is done."""

    def __init__(self, **tweens: Tween) -> None:
        if not tweens:
            raise ValueError("Parallel requires at least one tween")
        self._tweens = tweens

    def __getitem__(self, name: str) -> Tween:
        return self._tweens[name]

    @property
    def done(self) -> bool:
        return all(tween.done for tween in self._tweens.values())

    def values(self) -> dict[str, float]:
        return {name: tween.value() for name, tween in self._tweens.items()}

    def advance(self, dt: float) -> dict[str, float]:
        return {name: tween.advance(dt) for name, tween in self._tweens.items()}
