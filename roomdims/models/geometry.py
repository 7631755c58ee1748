"""Geometric primitives used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the room plane."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def __add__(self, other: Point2D | Vector2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Vector2D:
        return Vector2D(x=self.x - other.x, y=self.y - other.y)


class Vector2D(BaseModel):
    """2D vector for direction calculations."""
    x: float
    y: float

    @classmethod
    def from_angle(cls, theta: float) -> Vector2D:
        """Unit vector at `theta` radians from the +x axis."""
        return cls(x=math.cos(theta), y=math.sin(theta))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.y, y=self.x)

    def dot(self, other: Point2D | Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Direction in radians, as returned by atan2."""
        return math.atan2(self.y, self.x)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, y=self.y * scalar)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)


def undirected_angle_difference(a: float, b: float) -> float:
    """Smallest difference between two line angles, treating lines as undirected.

    The result lies in [0, pi/2].
    """
    diff = abs(a - b) % math.pi
    return min(diff, math.pi - diff)
