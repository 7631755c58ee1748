"""Triangle rooms: longest side as length, height over it as width."""

from __future__ import annotations
from itertools import combinations
import logging

from roomdims.sources.base import CandidateSource
from roomdims.models import (
    AnalysisContext, Dimension, RoomDimension, direction_from_points,
)


logger = logging.getLogger(__name__)


class TriangleSource(CandidateSource):
    """Three-corner rooms: baseline plus perpendicular height."""

    priority = 30

    def get_id(self) -> str:
        return "triangle.longest_side"

    def get_name(self) -> str:
        return "Triangle Longest Side"

    def applies(self, context: AnalysisContext) -> bool:
        return len(context.corners) == 3

    def generate(self, context: AnalysisContext) -> list[RoomDimension]:
        corners = context.corners

        # Longest side, first maximal pair wins
        best = None
        best_dist = -1.0
        for i, j in combinations(range(3), 2):
            dist = corners[i].point.distance_to(corners[j].point)
            if dist > best_dist:
                best, best_dist = (i, j), dist

        i, j = best
        third = next((k for k in range(3) if k not in (i, j)), None)
        if third is None:
            logger.debug("Triangle third corner not found, skipping")
            return []

        a, b, c = corners[i].point, corners[j].point, corners[third].point
        u = direction_from_points(a, b).normalized()
        if u.length() == 0.0:
            # All three corners coincide
            return []
        n = u.perpendicular()
        height = abs(n.dot(c - a))

        mid = a.lerp(b, 0.5)
        return [RoomDimension(
            length=Dimension.between(a, b),
            width=Dimension.between(mid, mid + n * height),
            source=self.get_id(),
        )]
