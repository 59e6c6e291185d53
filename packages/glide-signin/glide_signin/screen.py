"""SigninScreen - field state, submit handling, and decoration timing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from glide import FrameLoop, SignalBus, make_signal_system
from glide_form import FIELD_NAMES, Accepted, FormInputs, ValidationResult, validate
from glide_motion import (
    CornerMotion,
    MotionState,
    Point,
    PulseMotion,
    PulseState,
    WaypointSet,
    make_corner_system,
    make_pulse_system,
)

from glide_signin.config import ScreenConfig
from glide_signin.messages import describe

if TYPE_CHECKING:
    from glide import FrameContext

Notifier = Callable[[str, str], None]


class ScreenDisposedError(RuntimeError):
    """Raised when a torn-down screen is used again."""


@dataclass(frozen=True, slots=True)
class DecorFrame:
    """Per-frame values the view renderer draws the marker and halo with."""

    position: Point
    rotation: float
    scale: float
    opacity: float

    @property
    def rotation_css(self) -> str:
        return f"{self.rotation:g}deg"


class SigninScreen:
    """One sign-in screen instance.

    Owns the four field values and both decorative motions for its whole
    lifetime. ``mount()`` starts the motions, ``frame()`` advances them, and
    ``teardown()`` stops them for good; nothing updates after teardown.

    Signals published on ``bus``: ``leg_complete``, ``pulse_turn``,
    ``submitted`` (flushed once per frame, only while mounted) and
    ``teardown`` (flushed immediately, always the last signal delivered).
    """

    def __init__(
        self,
        viewport: tuple[float, float],
        notify: Notifier,
        config: ScreenConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else ScreenConfig()
        self._notify = notify
        self.bus = bus if bus is not None else SignalBus()
        self.inputs = FormInputs()

        cfg = self._config
        width, height = viewport
        self.waypoints = WaypointSet.from_viewport(
            width, height, cfg.margin, cfg.marker_extent,
        )
        self.corner = CornerMotion(
            self.waypoints,
            duration=cfg.leg_duration,
            turn=cfg.leg_rotation,
            easing=cfg.corner_easing,
            spin_easing=cfg.rotation_easing,
            on_arrive=self._on_arrive,
        )
        self.pulse = PulseMotion(
            half_period=cfg.pulse_half_period,
            scale_gain=cfg.pulse_scale_gain,
            base_opacity=cfg.pulse_base_opacity,
            on_turn=self._on_pulse_turn,
        )

        self.loop = FrameLoop(fps=cfg.fps)
        self.loop.add_system(make_corner_system(self.corner))
        self.loop.add_system(make_pulse_system(self.pulse))
        self.loop.add_system(make_signal_system(self.bus))
        self.loop.on_teardown(self._on_teardown)

    @property
    def config(self) -> ScreenConfig:
        return self._config

    @property
    def disposed(self) -> bool:
        return self.loop.disposed

    @property
    def motion_state(self) -> MotionState:
        return self.corner.state

    @property
    def pulse_state(self) -> PulseState:
        return self.pulse.state

    def _ensure_alive(self) -> None:
        if self.loop.disposed:
            raise ScreenDisposedError("Screen has been torn down")

    # -- Lifecycle --

    def mount(self) -> None:
        self._ensure_alive()
        self.loop.mount()

    def teardown(self) -> None:
        self.loop.teardown()

    def frame(self, elapsed_ms: float | None = None) -> int:
        """Advance one fixed frame, or as many as fit in ``elapsed_ms``."""
        if elapsed_ms is None:
            return 1 if self.loop.step() else 0
        return self.loop.feed(elapsed_ms)

    def decor(self) -> DecorFrame:
        motion = self.corner.state
        pulse = self.pulse.state
        return DecorFrame(
            position=motion.position,
            rotation=motion.rotation,
            scale=pulse.scale,
            opacity=pulse.opacity,
        )

    # -- Fields --

    def set_field(self, name: str, value: str) -> None:
        self._ensure_alive()
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown field {name!r}")
        setattr(self.inputs, name, value)

    def on_change(self, name: str) -> Callable[[str], None]:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown field {name!r}")

        def handler(value: str) -> None:
            self.set_field(name, value)

        return handler

    # -- Submit --

    def submit(self) -> ValidationResult:
        """Validate the current fields and notify exactly once."""
        self._ensure_alive()
        result = validate(self.inputs)
        title, message = describe(result)
        self._notify(title, message)
        if self.loop.mounted:
            accepted = isinstance(result, Accepted)
            self.bus.publish(
                "submitted",
                accepted=accepted,
                reason=None if accepted else result.reason.value,
            )
        return result

    # -- Motion observers --

    def _on_arrive(self, index: int, state: MotionState) -> None:
        self.bus.publish(
            "leg_complete",
            index=index,
            position=state.position,
            rotation=state.rotation,
        )

    def _on_pulse_turn(self, state: PulseState) -> None:
        self.bus.publish("pulse_turn", phase=state.phase, rising=state.rising)

    def _on_teardown(self, ctx: FrameContext) -> None:
        self.corner.stop()
        self.pulse.stop()
        self.bus.clear()
        self.bus.publish("teardown", frame=ctx.frame_number)
        self.bus.flush()
        self.bus.close()
