"""Room snapshot models — walls, corners and the resolved wall graph."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

from .geometry import Point2D, direction_from_points


class WallRef(BaseModel):
    """Reference to a wall from a corner's incidence lists."""
    model_config = ConfigDict(frozen=True)

    id: str


class Wall(BaseModel):
    """A wall edge. Its geometry comes from the corners that reference it."""
    model_config = ConfigDict(frozen=True)

    id: str


class Corner(BaseModel):
    """A room corner with the walls that start and end at it."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    x: FiniteFloat
    y: FiniteFloat
    wall_starts: list[WallRef] = Field(default_factory=list, alias="wallStarts")
    wall_ends: list[WallRef] = Field(default_factory=list, alias="wallEnds")

    @property
    def point(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    def starts_wall(self, wall_id: str) -> bool:
        return any(ref.id == wall_id for ref in self.wall_starts)

    def ends_wall(self, wall_id: str) -> bool:
        return any(ref.id == wall_id for ref in self.wall_ends)


class RoomData(BaseModel):
    """Immutable snapshot of a room's wall graph, as supplied by a loader."""
    model_config = ConfigDict(frozen=True)

    walls: list[Wall] = []
    corners: list[Corner] = []


class ResolvedWall(BaseModel):
    """A wall whose start and end corners were both found."""
    id: str
    start: Point2D
    end: Point2D

    @property
    def dx(self) -> float:
        return abs(self.end.x - self.start.x)

    @property
    def dy(self) -> float:
        return abs(self.end.y - self.start.y)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def angle(self) -> float:
        """Direction from start to end in radians."""
        return direction_from_points(self.start, self.end).angle()

    def is_aligned(self, tolerance: float) -> bool:
        return self.dx < tolerance or self.dy < tolerance

    def is_horizontal(self, tolerance: float) -> bool:
        return self.dy < tolerance

    def closest_point(self, p: Point2D) -> Point2D | None:
        """Closest point on the segment to `p`, or None for a zero-length wall."""
        ab = direction_from_points(self.start, self.end)
        denom = ab.length_squared()
        if denom < 1e-12 or not math.isfinite(denom):
            return None
        t = (p - self.start).dot(ab) / denom
        t = max(0.0, min(1.0, t))
        return self.start.lerp(self.end, t)
