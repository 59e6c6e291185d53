"""Corner motion: an endless glide between waypoints with a full turn per leg."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from glide_tween import Parallel, Tween

from glide_motion.geometry import Point, WaypointSet, lerp_point

if TYPE_CHECKING:
    from glide import FrameContext


@dataclass
class MotionState:
    """Live marker values read by the renderer every frame.

    ``rotation`` is cumulative degrees and is never wrapped, so the marker
    always keeps turning the same way.
    """

    position: Point
    rotation: float = 0.0
    target_index: int = 1
    legs_completed: int = 0


class CornerMotion:
    """State machine with a single state, MovingToTarget(target_index).

    Starts logically at waypoint 0 heading for waypoint 1. Each leg runs the
    eased position travel and the linear spin as one joined pair; on arrival
    both snap to their exact end values and the next leg starts at once.
    """

    def __init__(
        self,
        waypoints: WaypointSet,
        duration: float = 4000.0,
        turn: float = 360.0,
        easing: str = "in_out_ease",
        spin_easing: str = "linear",
        on_arrive: Callable[[int, MotionState], None] | None = None,
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._waypoints = waypoints
        self._duration = duration
        self._turn = turn
        self._easing = easing
        self._spin_easing = spin_easing
        self._on_arrive = on_arrive
        self._stopped = False
        self.state = MotionState(position=waypoints[0])
        self._origin: Point = waypoints[0]
        self._leg = self._start_leg()

    @property
    def waypoints(self) -> WaypointSet:
        return self._waypoints

    @property
    def target(self) -> Point:
        return self._waypoints[self.state.target_index]

    @property
    def stopped(self) -> bool:
        return self._stopped

    def _start_leg(self) -> Parallel:
        rotation = self.state.rotation
        return Parallel(
            travel=Tween(0.0, 1.0, self._duration, easing=self._easing),
            spin=Tween(rotation, rotation + self._turn, self._duration, easing=self._spin_easing),
        )

    def advance(self, dt: float) -> None:
        if self._stopped:
            return
        values = self._leg.advance(dt)
        if self._leg.done:
            self._arrive()
            return
        self.state.position = lerp_point(self._origin, self.target, values["travel"])
        self.state.rotation = values["spin"]

    def _arrive(self) -> None:
        state = self.state
        index = state.target_index
        state.position = self._waypoints[index]
        state.rotation = self._leg["spin"].end_val
        state.legs_completed += 1
        self._origin = state.position
        state.target_index = self._waypoints.next_index(index)
        self._leg = self._start_leg()
        if self._on_arrive is not None:
            self._on_arrive(index, state)

    def stop(self) -> None:
        self._stopped = True


def make_corner_system(motion: CornerMotion) -> Callable[[FrameContext], None]:
    def corner_system(ctx: FrameContext) -> None:
        motion.advance(ctx.dt)

    return corner_system
