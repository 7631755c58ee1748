"""Dimension engine — orchestrates analysis, sources and postprocessing."""

from __future__ import annotations
import logging

from roomdims.models import (
    AnalysisContext, InferenceConfig, InferenceMode, InferenceParams,
    RoomData, RoomDimension,
)
from roomdims.core.registry import SourceRegistry, create_default_registry
from roomdims.core.analyzer import WallAnalyzer
from roomdims.core.postprocess import deduplicate, filter_by_walls, rank


logger = logging.getLogger(__name__)


class DimensionEngine:
    """
    Stateless dimension engine.

    Takes a room snapshot + params, resolves the wall graph, runs the
    applicable candidate sources, and returns the ranked candidates.
    """

    def __init__(self, registry: SourceRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = WallAnalyzer()

    def infer(
        self,
        room: RoomData,
        params: InferenceParams | None = None,
        config: InferenceConfig | None = None,
    ) -> list[RoomDimension]:
        if params is None:
            params = InferenceParams()
        if config is None:
            config = InferenceConfig()

        if not room.corners:
            return []

        context = AnalysisContext(room=room, params=params, config=config)

        # Analysis phase: resolve walls, classify aligned ones
        self.analyzer.analyze(context)
        logger.debug(
            "Resolved %d/%d walls (%d horizontal, %d vertical)",
            len(context.walls), len(room.walls),
            len(context.horizontal), len(context.vertical),
        )

        # Generation phase: run applicable sources in order
        for source in self.registry.get_active_sources(context):
            if not source.applies(context):
                continue
            found = source.generate(context)
            logger.debug("Source %s proposed %d candidates", source.get_id(), len(found))
            context.add_candidates(found)

        candidates = deduplicate(context.candidates, params.decimals_for(config.mode))
        candidates = rank(candidates)

        if config.mode == InferenceMode.PRECISION:
            candidates = filter_by_walls(
                candidates,
                context.walls,
                params.parallel_tolerance,
                params.proximity_tolerance,
            )

        logger.debug(
            "%d raw candidates, %d after %s pipeline",
            len(context.candidates), len(candidates), config.mode.value,
        )
        return candidates


def infer_dimensions(
    room: RoomData,
    params: InferenceParams | None = None,
    config: InferenceConfig | None = None,
) -> list[RoomDimension]:
    """Ranked length/width candidates for a room snapshot.

    Pure function of its arguments; call again whenever the snapshot changes.
    """
    return DimensionEngine().infer(room, params, config)
