"""Shared types for the frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_teardown: Callable[[], None]


class LoopDisposedError(RuntimeError):
    """Raised when registering work on a loop that has been torn down."""


System = Callable[[FrameContext], None]
Hook = Callable[[FrameContext], None]
