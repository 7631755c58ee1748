"""Aligned wall pairs — the primary length/width guess and its alternates.

The longest horizontal and longest vertical walls are the best single
guess. Rooms with alcoves or bay windows often have several plausible
readings, so pairs of the next-longest walls are offered as alternates.
"""

from __future__ import annotations
from itertools import product

from roomdims.sources.base import CandidateSource
from roomdims.models import AnalysisContext, Dimension, ResolvedWall, RoomDimension


class AlignedWallSource(CandidateSource):
    """Pairs the longest horizontal walls with the longest vertical walls."""

    priority = 10

    def get_id(self) -> str:
        return "aligned.walls"

    def get_name(self) -> str:
        return "Aligned Wall Pairs"

    def applies(self, context: AnalysisContext) -> bool:
        return len(context.horizontal) > 0 and len(context.vertical) > 0

    def generate(self, context: AnalysisContext) -> list[RoomDimension]:
        depth = context.params.combination_depth
        top_h = context.horizontal[:depth]
        top_v = context.vertical[:depth]

        # Primary pair first, then the remaining combinations row by row
        candidates = [self._pair(top_h[0], top_v[0])]
        for i, j in product(range(len(top_h)), range(len(top_v))):
            if i == 0 and j == 0:
                continue
            candidates.append(self._pair(top_h[i], top_v[j]))
        return candidates

    def _pair(self, length_wall: ResolvedWall, width_wall: ResolvedWall) -> RoomDimension:
        return RoomDimension(
            length=Dimension.between(length_wall.start, length_wall.end),
            width=Dimension.between(width_wall.start, width_wall.end),
            source=self.get_id(),
        )
