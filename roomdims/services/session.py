"""Selection sessions: a room snapshot, its candidates and a cursor."""

from __future__ import annotations
import logging
import uuid

from roomdims.models import (
    InferenceConfig, InferenceParams, RoomData, RoomDimension, SelectionCursor,
)
from roomdims.services.dimension_service import DimensionService


logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No session with the requested id."""


class DimensionSession:
    """
    Caller-owned display state for one room.

    Candidates are recomputed only when the room snapshot actually
    changes (deep equality); the cursor resets on every recompute.
    """

    def __init__(
        self,
        service: DimensionService,
        room: RoomData,
        params: InferenceParams | None = None,
        config: InferenceConfig | None = None,
    ) -> None:
        self.service = service
        self.params = params or InferenceParams()
        self.config = config or InferenceConfig()
        self.cursor = SelectionCursor()
        self.room = room
        self.candidates: list[RoomDimension] = service.infer(room, self.params, self.config)

    @property
    def count(self) -> int:
        return len(self.candidates)

    def update(self, room: RoomData) -> bool:
        """Swap in a new snapshot. Returns True if candidates were recomputed."""
        if room == self.room:
            return False
        self.room = room
        self.candidates = self.service.infer(room, self.params, self.config)
        self.cursor.reset()
        return True

    def advance(self) -> int:
        return self.cursor.advance(self.count)

    def current(self) -> RoomDimension | None:
        return self.cursor.current(self.candidates)


class SessionStore:
    """In-memory session registry keyed by generated ids."""

    def __init__(self, service: DimensionService) -> None:
        self.service = service
        self._sessions: dict[str, DimensionSession] = {}

    def create(
        self,
        room: RoomData,
        params: InferenceParams | None = None,
        config: InferenceConfig | None = None,
    ) -> tuple[str, DimensionSession]:
        session_id = uuid.uuid4().hex
        session = DimensionSession(self.service, room, params, config)
        self._sessions[session_id] = session
        logger.info("Created session %s with %d candidates", session_id, session.count)
        return session_id, session

    def get(self, session_id: str) -> DimensionSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Deleted session %s", session_id)
