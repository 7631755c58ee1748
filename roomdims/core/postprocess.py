"""Candidate postprocessing — normalization, dedup, ranking, wall filter."""

from __future__ import annotations

from roomdims.models import (
    Dimension, Point2D, ResolvedWall, RoomDimension, undirected_angle_difference,
)


def dedup_key(candidate: RoomDimension, decimals: int) -> str:
    """Key over the 8 normalized coordinates of a pair, rounded to `decimals`."""
    coords = candidate.length.normalized().coordinates() + candidate.width.normalized().coordinates()
    # + 0.0 folds -0.0 into 0.0
    return ",".join(f"{round(v, decimals) + 0.0:.{decimals}f}" for v in coords)


def deduplicate(candidates: list[RoomDimension], decimals: int) -> list[RoomDimension]:
    """Normalize every candidate and drop repeats. First occurrence wins."""
    seen: set[str] = set()
    unique: list[RoomDimension] = []
    for candidate in candidates:
        key = dedup_key(candidate, decimals)
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate.normalized())
    return unique


def rank(candidates: list[RoomDimension]) -> list[RoomDimension]:
    """Biggest length first, then biggest width."""
    return sorted(candidates, key=lambda c: (-c.length.value, -c.width.value))


def is_parallel_to_any(segment: Dimension, walls: list[ResolvedWall], tolerance: float) -> bool:
    angle = segment.angle
    for wall in walls:
        if wall.length < 1e-6:
            continue
        if undirected_angle_difference(angle, wall.angle) < tolerance:
            return True
    return False


def is_near_any(point: Point2D, walls: list[ResolvedWall], tolerance: float) -> bool:
    for wall in walls:
        closest = wall.closest_point(point)
        if closest is None:
            continue
        if point.distance_to(closest) <= tolerance:
            return True
    return False


def filter_by_walls(
    candidates: list[RoomDimension],
    walls: list[ResolvedWall],
    parallel_tolerance: float,
    proximity_tolerance: float,
) -> list[RoomDimension]:
    """Keep candidates that run along a wall and whose endpoints all touch walls."""
    kept: list[RoomDimension] = []
    for candidate in candidates:
        parallel = (
            is_parallel_to_any(candidate.length, walls, parallel_tolerance)
            or is_parallel_to_any(candidate.width, walls, parallel_tolerance)
        )
        if not parallel:
            continue
        if all(is_near_any(p, walls, proximity_tolerance) for p in candidate.endpoints()):
            kept.append(candidate)
    return kept
