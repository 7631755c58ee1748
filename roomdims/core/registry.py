"""Source registry — stores and resolves candidate sources."""

from __future__ import annotations

from roomdims.models.context import AnalysisContext
from roomdims.sources.base import CandidateSource


class SourceRegistry:
    """
    Central registry for all candidate sources.

    Sources are registered at startup. During inference, the registry
    returns the applicable sources sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._sources: dict[str, CandidateSource] = {}

    def register(self, source: CandidateSource) -> None:
        """Register a candidate source."""
        self._sources[source.get_id()] = source

    def unregister(self, source_id: str) -> None:
        """Remove a source from the registry."""
        self._sources.pop(source_id, None)

    def get_source(self, source_id: str) -> CandidateSource | None:
        return self._sources.get(source_id)

    def list_sources(self) -> list[CandidateSource]:
        """Return all registered sources."""
        return list(self._sources.values())

    def get_active_sources(self, context: AnalysisContext) -> list[CandidateSource]:
        """
        Return sources enabled for the context's mode, in run order.

        Respects InferenceConfig.enabled_sources and disabled_sources.
        `applies()` is left to the engine, since a source may depend on
        candidates produced by the sources ordered before it.
        """
        config = context.config
        candidates = [s for s in self._sources.values() if config.mode in s.modes]

        # If enabled_sources is specified, only use those
        if config.enabled_sources:
            candidates = [s for s in candidates if s.get_id() in config.enabled_sources]

        # Remove explicitly disabled sources
        if config.disabled_sources:
            candidates = [s for s in candidates if s.get_id() not in config.disabled_sources]

        # Sort by priority (lower first), then resolve dependencies
        candidates.sort(key=lambda s: s.priority)
        return self._resolve_order(candidates)

    def _resolve_order(self, sources: list[CandidateSource]) -> list[CandidateSource]:
        """Topological sort respecting dependencies."""
        source_map = {s.get_id(): s for s in sources}
        visited: set[str] = set()
        ordered: list[CandidateSource] = []

        def visit(source_id: str) -> None:
            if source_id in visited:
                return
            visited.add(source_id)
            source = source_map.get(source_id)
            if source is None:
                return
            for dep_id in source.dependencies:
                visit(dep_id)
            ordered.append(source)

        for s in sources:
            visit(s.get_id())

        return ordered


def create_default_registry() -> SourceRegistry:
    """Create a registry with all standard candidate sources."""
    from roomdims.sources import (
        AlignedWallSource, FixedAngleExtremeSource, PerWallExtremeSource, TriangleSource,
    )

    registry = SourceRegistry()
    registry.register(AlignedWallSource())
    registry.register(FixedAngleExtremeSource())
    registry.register(PerWallExtremeSource())
    registry.register(TriangleSource())
    return registry
