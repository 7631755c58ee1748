"""Wall graph analysis — endpoint resolution and axis alignment."""

from __future__ import annotations
import logging

from roomdims.models import AnalysisContext, Corner, ResolvedWall, RoomData


logger = logging.getLogger(__name__)


def find_wall_corners(
    room: RoomData, wall_id: str,
) -> tuple[Corner | None, Corner | None]:
    """Return the (start, end) corners of a wall from corner incidence lists."""
    start = next((c for c in room.corners if c.starts_wall(wall_id)), None)
    end = next((c for c in room.corners if c.ends_wall(wall_id)), None)
    return start, end


def resolve_walls(room: RoomData) -> list[ResolvedWall]:
    """Resolve every wall with both endpoints present, in input order.

    Walls missing either corner are skipped.
    """
    resolved: list[ResolvedWall] = []
    for wall in room.walls:
        start, end = find_wall_corners(room, wall.id)
        if start is None or end is None:
            logger.debug("Wall %s is unresolved, skipping", wall.id)
            continue
        resolved.append(ResolvedWall(id=wall.id, start=start.point, end=end.point))
    return resolved


class WallAnalyzer:
    """Resolves the wall graph and classifies axis-aligned walls."""

    def analyze(self, context: AnalysisContext) -> None:
        """Run all analysis passes and populate the context."""
        context.walls = resolve_walls(context.room)
        context.horizontal, context.vertical = self._classify_aligned(context)

    def _classify_aligned(
        self, context: AnalysisContext,
    ) -> tuple[list[ResolvedWall], list[ResolvedWall]]:
        """Split aligned walls into horizontal and vertical, longest first."""
        eps = context.params.alignment_tolerance
        horizontal: list[ResolvedWall] = []
        vertical: list[ResolvedWall] = []

        for wall in context.walls:
            if not wall.is_aligned(eps):
                continue
            if wall.is_horizontal(eps):
                horizontal.append(wall)
            else:
                vertical.append(wall)

        # sort() is stable, so equal lengths keep input order
        horizontal.sort(key=lambda w: w.length, reverse=True)
        vertical.sort(key=lambda w: w.length, reverse=True)
        return horizontal, vertical
