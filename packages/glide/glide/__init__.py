"""glide - A fixed-timestep frame loop for animated screens."""

from glide.clock import FrameClock
from glide.loop import FrameLoop
from glide.signals import SignalBus, make_signal_system
from glide.types import FrameContext, LoopDisposedError, System

__all__ = [
    "FrameLoop",
    "FrameClock",
    "FrameContext",
    "LoopDisposedError",
    "SignalBus",
    "System",
    "make_signal_system",
]
