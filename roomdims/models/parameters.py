"""Inference tolerances and configuration."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field, FiniteFloat


# Named defaults. Each encodes a design choice callers may want to tune.
ALIGNMENT_TOLERANCE = 0.01      # Max axis delta for a wall to count as aligned
PARALLEL_TOLERANCE = 0.01       # Radians, undirected line comparison
PROXIMITY_TOLERANCE = 0.5       # Max endpoint distance to a wall
COMBINATION_DEPTH = 3           # Top-N walls per axis used for combinations
FALLBACK_CORNER_LIMIT = 4       # Rooms with this many corners or fewer get fallback candidates
EXTREME_TIE_TOLERANCE = 0.01    # Projections this close count as the same extreme
FALLBACK_ANGLES = [0.0, 90.0, 45.0, 135.0]  # Degrees
PRECISION_DEDUP_DECIMALS = 2
SIMPLE_DEDUP_DECIMALS = 1


class InferenceMode(str, Enum):
    PRECISION = "precision"  # Aligned walls + fallbacks, adjacency/parallelism filter
    SIMPLE = "simple"        # Per-wall extreme points only, unfiltered


class InferenceParams(BaseModel):
    """User-adjustable tolerances for dimension inference."""
    alignment_tolerance: float = Field(ALIGNMENT_TOLERANCE, ge=0)
    parallel_tolerance: float = Field(PARALLEL_TOLERANCE, ge=0)
    proximity_tolerance: float = Field(PROXIMITY_TOLERANCE, ge=0)
    extreme_tie_tolerance: float = Field(EXTREME_TIE_TOLERANCE, ge=0)
    combination_depth: int = Field(COMBINATION_DEPTH, ge=1)
    fallback_corner_limit: int = Field(FALLBACK_CORNER_LIMIT, ge=0)
    fallback_angles: list[FiniteFloat] = FALLBACK_ANGLES
    dedup_decimals: int | None = Field(None, ge=0)  # None = per-mode default

    def decimals_for(self, mode: InferenceMode) -> int:
        if self.dedup_decimals is not None:
            return self.dedup_decimals
        if mode == InferenceMode.SIMPLE:
            return SIMPLE_DEDUP_DECIMALS
        return PRECISION_DEDUP_DECIMALS


class InferenceConfig(BaseModel):
    """Controls which pipeline variant and candidate sources are applied."""
    mode: InferenceMode = InferenceMode.PRECISION
    enabled_sources: list[str] = []   # Empty = use all registered defaults
    disabled_sources: list[str] = []  # Explicitly disable specific sources
