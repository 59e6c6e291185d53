"""glide-motion - Endless decorative motions for the frame loop."""
from __future__ import annotations

from glide_motion.corner import CornerMotion, MotionState, make_corner_system
from glide_motion.geometry import Point, WaypointSet, lerp_point
from glide_motion.pulse import PulseMotion, PulseState, make_pulse_system

__all__ = [
    "CornerMotion",
    "MotionState",
    "PulseMotion",
    "PulseState",
    "Point",
    "WaypointSet",
    "lerp_point",
    "make_corner_system",
    "make_pulse_system",
]
