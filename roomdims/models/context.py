"""Analysis context — accumulates state during one inference pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .dimensions import RoomDimension
from .parameters import InferenceParams, InferenceConfig
from .room import Corner, RoomData, ResolvedWall


class AnalysisContext(BaseModel):
    """
    Holds all state during a single inference pass.

    The analyzer resolves and classifies walls.
    Candidate sources add raw candidates.
    The engine normalizes, ranks and filters them.
    """
    # Input
    room: RoomData
    params: InferenceParams = Field(default_factory=InferenceParams)
    config: InferenceConfig = Field(default_factory=InferenceConfig)

    # Analysis results (populated by the analyzer)
    walls: list[ResolvedWall] = []
    horizontal: list[ResolvedWall] = []  # Longest first
    vertical: list[ResolvedWall] = []    # Longest first

    # Output (populated by sources)
    candidates: list[RoomDimension] = []

    @property
    def corners(self) -> list[Corner]:
        return self.room.corners

    def add_candidates(self, candidates: list[RoomDimension]) -> None:
        self.candidates.extend(candidates)

    def candidates_from(self, source_id: str) -> list[RoomDimension]:
        return [c for c in self.candidates if c.source == source_id]
