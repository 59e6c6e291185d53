"""2D point helpers and the corner waypoint set."""
from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_point(a: Point, b: Point, t: float) -> Point:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t))


@dataclass(frozen=True)
class WaypointSet:
    """Ordered, cyclic corner points: top-left, top-right, bottom-right, bottom-left."""

    points: tuple[Point, Point, Point, Point]

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def next_index(self, index: int) -> int:
        return (index + 1) % len(self.points)

    @classmethod
    def from_viewport(
        cls, width: float, height: float, margin: float, extent: float,
    ) -> WaypointSet:
        """Inset each corner by ``margin`` and the marker's own ``extent``.

        A viewport too small for the insets (including zero or negative
        sizes) collapses the far corners onto the near margin instead of
        failing, so the marker holds still and only rotates.
        """
        if margin < 0 or extent < 0:
            raise ValueError("margin and extent must be non-negative")
        near = float(margin)
        far_x = max(near, float(width) - margin - extent)
        far_y = max(near, float(height) - margin - extent)
        return cls(points=((near, near), (far_x, near), (far_x, far_y), (near, far_y)))
