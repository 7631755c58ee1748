"""Abstract base class for all candidate sources.

Every source in the system implements this interface. Sources are:
- Self-contained: each proposes candidates from one geometric idea
- Composable: multiple sources run in sequence via the registry
- Conditional: each source decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from roomdims.models.context import AnalysisContext
from roomdims.models.dimensions import RoomDimension
from roomdims.models.parameters import InferenceMode


class CandidateSource(ABC):
    """
    Base class for all candidate sources.

    Subclasses implement `applies()` and `generate()`.
    The engine queries the registry, filters by mode and `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of sources that must run before this one.
    dependencies: list[str] = []

    # Pipeline variants this source belongs to.
    modes: frozenset[InferenceMode] = frozenset({InferenceMode.PRECISION})

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this source (e.g., 'aligned.walls')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Aligned Wall Pairs')."""
        ...

    @abstractmethod
    def applies(self, context: AnalysisContext) -> bool:
        """Return True if this source should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: AnalysisContext) -> list[RoomDimension]:
        """
        Propose candidates for the given context.

        The context provides the room, params, resolved walls and any
        candidates produced by sources that ran earlier.
        """
        ...
