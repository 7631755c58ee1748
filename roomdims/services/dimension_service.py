"""High-level dimension service — facade for the API layer."""

from __future__ import annotations

from roomdims.models import (
    InferenceConfig, InferenceParams, RoomData, RoomDimension,
)
from roomdims.core.engine import DimensionEngine
from roomdims.core.registry import SourceRegistry, create_default_registry


class DimensionService:
    """Delegates to the engine and exposes registry metadata."""

    def __init__(self, registry: SourceRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.engine = DimensionEngine(self.registry)

    def infer(
        self,
        room: RoomData,
        params: InferenceParams | None = None,
        config: InferenceConfig | None = None,
    ) -> list[RoomDimension]:
        return self.engine.infer(room, params, config)

    def list_sources(self) -> list[dict[str, str]]:
        return [
            {
                "id": s.get_id(),
                "name": s.get_name(),
                "modes": ",".join(sorted(m.value for m in s.modes)),
            }
            for s in self.registry.list_sources()
        ]
