"""Easing curves for tween interpolation.

Every curve maps normalized time ``t`` in [0, 1] to progress, with
``f(0) == 0`` and ``f(1) == 1``.
"""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_BISECT_ITERATIONS = 40
_PRECISION = 1e-7


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Cubic-bezier curve through (0, 0), (x1, y1), (x2, y2), (1, 1).

    Same parameterization as CSS ``cubic-bezier()``. The control x values
    must lie in [0, 1] so the curve is a function of time.
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("bezier x control points must be in [0, 1]")
    if x1 == y1 and x2 == y2:
        return linear

    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx
    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def solve(x: float) -> float:
        s = x
        for _ in range(_NEWTON_ITERATIONS):
            err = sample_x(s) - x
            if abs(err) < _PRECISION:
                return s
            d = slope_x(s)
            if abs(d) < 1e-6:
                break
            s -= err / d
            if not 0.0 <= s <= 1.0:
                break

        lo, hi = 0.0, 1.0
        s = x
        for _ in range(_BISECT_ITERATIONS):
            value = sample_x(s)
            if abs(value - x) < _PRECISION:
                break
            if value < x:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def curve(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return sample_y(solve(t))

    return curve


def in_out(fn: Easing) -> Easing:
    """Mirror an ease-in curve so it accelerates then decelerates."""

    def curve(t: float) -> float:
        if t < 0.5:
            return fn(t * 2) / 2
        return 1 - fn((1 - t) * 2) / 2

    return curve


ease = bezier(0.42, 0.0, 1.0, 1.0)
in_out_ease = in_out(ease)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease": ease,
    "in_out_ease": in_out_ease,
}


def resolve(name: str) -> Easing:
    """Look up an easing by name. Raises KeyError for unknown names."""
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"Unknown easing {name!r}") from None
