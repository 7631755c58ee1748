"""Extreme-point projection sources.

Projecting every corner onto a direction and taking the two extremes gives
the room's span along that direction. Pairing it with the span along the
perpendicular direction yields a length/width candidate.
"""

from __future__ import annotations
import math

from roomdims.sources.base import CandidateSource
from roomdims.models import (
    AnalysisContext, Corner, Dimension, InferenceMode, RoomDimension, Vector2D,
)
from roomdims.models.parameters import EXTREME_TIE_TOLERANCE


def extreme_points(
    corners: list[Corner], theta: float, tolerance: float = EXTREME_TIE_TOLERANCE,
) -> Dimension | None:
    """Segment from the corner with minimal to the one with maximal projection.

    Projections within `tolerance` of an extreme are ties, broken by the
    smaller projection on the perpendicular direction so axis-aligned rooms
    get axis-aligned spans. Returns None for no corners.
    """
    if not corners:
        return None

    direction = Vector2D.from_angle(theta)
    normal = direction.perpendicular()
    projected = [(direction.dot(c.point), normal.dot(c.point), c) for c in corners]

    lo_proj = min(p[0] for p in projected)
    hi_proj = max(p[0] for p in projected)
    # min() keeps the first corner on exact perpendicular ties
    lo = min((p for p in projected if p[0] <= lo_proj + tolerance), key=lambda p: p[1])[2]
    hi = min((p for p in projected if p[0] >= hi_proj - tolerance), key=lambda p: p[1])[2]

    return Dimension.between(lo.point, hi.point)


def span_pair(
    corners: list[Corner],
    theta: float,
    source: str,
    tolerance: float = EXTREME_TIE_TOLERANCE,
) -> RoomDimension | None:
    """Candidate from the spans at `theta` (length) and `theta + 90deg` (width)."""
    length = extreme_points(corners, theta, tolerance)
    width = extreme_points(corners, theta + math.pi / 2, tolerance)
    if length is None or width is None:
        return None
    return RoomDimension(length=length, width=width, source=source)


class FixedAngleExtremeSource(CandidateSource):
    """Spans at fixed angles, for rooms without aligned pairs or with few corners."""

    priority = 20
    dependencies = ["aligned.walls"]

    def get_id(self) -> str:
        return "extreme.fixed_angles"

    def get_name(self) -> str:
        return "Fixed-Angle Extreme Points"

    def applies(self, context: AnalysisContext) -> bool:
        n = len(context.corners)
        if n == 0:
            return False
        no_aligned = not context.candidates_from("aligned.walls")
        return no_aligned or n <= context.params.fallback_corner_limit

    def generate(self, context: AnalysisContext) -> list[RoomDimension]:
        candidates: list[RoomDimension] = []
        for degrees in context.params.fallback_angles:
            pair = span_pair(
                context.corners, math.radians(degrees), self.get_id(),
                context.params.extreme_tie_tolerance,
            )
            if pair is not None:
                candidates.append(pair)
        return candidates


class PerWallExtremeSource(CandidateSource):
    """Spans along and across each wall's own direction. Sole source in simple mode."""

    priority = 20
    modes = frozenset({InferenceMode.SIMPLE})

    def get_id(self) -> str:
        return "extreme.per_wall"

    def get_name(self) -> str:
        return "Per-Wall Extreme Points"

    def applies(self, context: AnalysisContext) -> bool:
        return len(context.corners) > 0 and len(context.walls) > 0

    def generate(self, context: AnalysisContext) -> list[RoomDimension]:
        candidates: list[RoomDimension] = []
        for wall in context.walls:
            pair = span_pair(
                context.corners, wall.angle, self.get_id(),
                context.params.extreme_tie_tolerance,
            )
            if pair is not None:
                candidates.append(pair)
        return candidates
