"""Selection cursor over a ranked candidate list."""

from __future__ import annotations
from pydantic import BaseModel

from .dimensions import RoomDimension


class SelectionCursor(BaseModel):
    """Index of the currently displayed candidate."""
    current_index: int = 0

    def advance(self, count: int) -> int:
        """Move to the next candidate, wrapping around. No-op when empty."""
        if count > 0:
            self.current_index = (self.current_index + 1) % count
        return self.current_index

    def reset(self) -> None:
        self.current_index = 0

    def current(self, candidates: list[RoomDimension]) -> RoomDimension | None:
        if not candidates:
            return None
        return candidates[self.current_index % len(candidates)]
