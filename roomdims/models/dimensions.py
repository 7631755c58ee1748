"""Dimension output models."""

from __future__ import annotations
import math
from pydantic import BaseModel

from .geometry import Point2D


class Dimension(BaseModel):
    """A directed segment with its Euclidean length."""
    x1: float
    y1: float
    x2: float
    y2: float
    value: float

    @classmethod
    def between(cls, start: Point2D, end: Point2D) -> Dimension:
        return cls(
            x1=start.x, y1=start.y,
            x2=end.x, y2=end.y,
            value=math.hypot(end.x - start.x, end.y - start.y),
        )

    @property
    def start(self) -> Point2D:
        return Point2D(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(x=self.x2, y=self.y2)

    @property
    def angle(self) -> float:
        return math.atan2(self.y2 - self.y1, self.x2 - self.x1)

    def normalized(self) -> NormalizedDimension:
        """Return the segment with endpoints in canonical (x, then y) order."""
        if self.x1 > self.x2 or (self.x1 == self.x2 and self.y1 > self.y2):
            x1, y1, x2, y2 = self.x2, self.y2, self.x1, self.y1
        else:
            x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        return NormalizedDimension(x1=x1, y1=y1, x2=x2, y2=y2, value=self.value)

    def coordinates(self) -> tuple[float, float, float, float]:
        return self.x1, self.y1, self.x2, self.y2


class NormalizedDimension(Dimension):
    """A Dimension whose endpoints are in canonical order."""


class RoomDimension(BaseModel):
    """One candidate interpretation of a room's length and width."""
    length: Dimension
    width: Dimension
    source: str = ""  # Id of the candidate source that produced it

    def normalized(self) -> RoomDimension:
        return RoomDimension(
            length=self.length.normalized(),
            width=self.width.normalized(),
            source=self.source,
        )

    def endpoints(self) -> list[Point2D]:
        return [self.length.start, self.length.end, self.width.start, self.width.end]
