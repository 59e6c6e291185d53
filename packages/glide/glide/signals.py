"""In-memory pub/sub signal bus with per-frame flush semantics."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from glide.types import FrameContext

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues signals and delivers them on ``flush()``.

    Once closed the bus delivers nothing more, including the remainder of a
    flush already in progress.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        if self._closed:
            return
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        """Dispatch queued signals. Handler errors are reported, not raised."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                if self._closed:
                    return
                try:
                    handler(signal_name, data)
                except Exception:
                    print(
                        f"glide: {signal_name} handler error: {sys.exc_info()[1]}",
                        file=sys.stderr,
                    )

    def clear(self) -> None:
        self._queue.clear()

    def close(self) -> None:
        self._closed = True
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[[FrameContext], None]:
    def signal_system(ctx: FrameContext) -> None:
        bus.flush()

    return signal_system
