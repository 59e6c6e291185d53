"""Screen configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from glide_tween import resolve


@dataclass(frozen=True)
class ScreenConfig:
    """Immutable timing and geometry settings for the sign-in screen.

    Attributes:
        fps: Fixed frame rate of the update loop.
        margin: Inset of every waypoint from the viewport edge.
        marker_extent: Marker size subtracted from the far edges so it never clips.
        leg_duration: Milliseconds per corner-to-corner leg.
        leg_rotation: Degrees turned per leg.
        pulse_half_period: Milliseconds for the halo to rise (and again to fall).
        pulse_scale_gain: Extra scale at the pulse peak.
        pulse_base_opacity: Halo opacity at the pulse trough.
        corner_easing: Easing name for the marker's travel.
        rotation_easing: Easing name for the marker's spin.
    """

    fps: int = 60
    margin: float = 50.0
    marker_extent: float = 100.0
    leg_duration: float = 4000.0
    leg_rotation: float = 360.0
    pulse_half_period: float = 2000.0
    pulse_scale_gain: float = 0.25
    pulse_base_opacity: float = 0.6
    corner_easing: str = "in_out_ease"
    rotation_easing: str = "linear"

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.margin < 0 or self.marker_extent < 0:
            raise ValueError("margin and marker_extent must be non-negative")
        if self.leg_duration <= 0 or self.pulse_half_period <= 0:
            raise ValueError("durations must be positive")
        if self.leg_rotation < 0:
            raise ValueError("leg_rotation must be non-negative")
        resolve(self.corner_easing)
        resolve(self.rotation_easing)
