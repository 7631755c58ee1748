"""Mapping room coordinates onto a fixed drawing surface."""

from __future__ import annotations
from pydantic import BaseModel

from roomdims.models import Dimension, Point2D, RoomData, direction_from_points


DEFAULT_LABEL_OFFSET = 15.0  # Pixels


class DimensionLabel(BaseModel):
    """Numeric label drawn beside a segment."""
    text: str
    anchor: Point2D


class Viewport(BaseModel):
    """Uniform, aspect-preserving scale of the room into a padded surface."""
    scale: float
    padding: float
    min_x: float
    min_y: float

    @classmethod
    def fit(cls, room: RoomData, width: float, height: float, padding: float) -> Viewport:
        if not room.corners:
            return cls(scale=1.0, padding=padding, min_x=0.0, min_y=0.0)

        xs = [c.x for c in room.corners]
        ys = [c.y for c in room.corners]
        room_w = max(xs) - min(xs)
        room_h = max(ys) - min(ys)

        # Padding larger than the surface leaves no drawable extent
        usable_w = max(0.0, width - 2 * padding)
        usable_h = max(0.0, height - 2 * padding)

        scales = []
        if room_w > 0:
            scales.append(usable_w / room_w)
        if room_h > 0:
            scales.append(usable_h / room_h)
        scale = min(scales) if scales else 1.0

        return cls(scale=scale, padding=padding, min_x=min(xs), min_y=min(ys))

    def to_screen(self, p: Point2D) -> Point2D:
        return Point2D(
            x=self.padding + (p.x - self.min_x) * self.scale,
            y=self.padding + (p.y - self.min_y) * self.scale,
        )

    def segment_to_screen(self, dim: Dimension) -> tuple[Point2D, Point2D]:
        return self.to_screen(dim.start), self.to_screen(dim.end)

    def label_for(self, dim: Dimension, offset: float = DEFAULT_LABEL_OFFSET) -> DimensionLabel:
        """Label at the screen midpoint, pushed `offset` pixels off the segment."""
        start, end = self.segment_to_screen(dim)
        mid = start.lerp(end, 0.5)
        normal = direction_from_points(start, end).normalized().perpendicular()
        return DimensionLabel(text=f"{dim.value:.2f}", anchor=mid + normal * offset)
