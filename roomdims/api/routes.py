"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from roomdims.core.analyzer import resolve_walls
from roomdims.models import Dimension, RoomData
from roomdims.services.dimension_service import DimensionService
from roomdims.services.fixtures import RoomFixtureError, RoomFixtureLoader
from roomdims.services.session import DimensionSession, SessionNotFoundError, SessionStore
from roomdims.services.viewport import Viewport
from roomdims.api.schemas import (
    DrawingResponse, InferRequest, InferResponse, ScreenSegment,
    SelectedSegment, SelectionResponse, SourceInfo,
)

router = APIRouter()


def get_service(request: Request) -> DimensionService:
    return request.app.state.service


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_loader(request: Request) -> RoomFixtureLoader:
    return request.app.state.loader


def _session_or_404(sessions: SessionStore, session_id: str) -> DimensionSession:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")


def _selection(session_id: str, session: DimensionSession) -> SelectionResponse:
    return SelectionResponse(
        session_id=session_id,
        current_index=session.cursor.current_index,
        count=session.count,
        current=session.current(),
    )


def _selected(viewport: Viewport, dim: Dimension) -> SelectedSegment:
    start, end = viewport.segment_to_screen(dim)
    return SelectedSegment(start=start, end=end, label=viewport.label_for(dim))


@router.post("/dimensions", response_model=InferResponse)
async def infer_dimensions(
    request: InferRequest, service: DimensionService = Depends(get_service),
) -> InferResponse:
    """Infer ranked length/width candidates for a room snapshot."""
    dimensions = service.infer(request.room, request.params, request.config)
    return InferResponse(
        dimensions=dimensions,
        wall_count=len(request.room.walls),
        corner_count=len(request.room.corners),
    )


@router.get("/rooms", response_model=list[str])
async def list_rooms(loader: RoomFixtureLoader = Depends(get_loader)) -> list[str]:
    """List the named room fixtures."""
    return loader.list_names()


@router.get("/rooms/{name}/dimensions", response_model=InferResponse)
async def room_dimensions(
    name: str,
    service: DimensionService = Depends(get_service),
    loader: RoomFixtureLoader = Depends(get_loader),
) -> InferResponse:
    """Load a named room fixture and infer its dimensions."""
    try:
        room = loader.load(name)
    except RoomFixtureError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return InferResponse(
        dimensions=service.infer(room),
        wall_count=len(room.walls),
        corner_count=len(room.corners),
    )


@router.post("/sessions", response_model=SelectionResponse, status_code=201)
async def create_session(
    request: InferRequest, sessions: SessionStore = Depends(get_sessions),
) -> SelectionResponse:
    """Start a selection session over a room's candidates."""
    session_id, session = sessions.create(request.room, request.params, request.config)
    return _selection(session_id, session)


@router.put("/sessions/{session_id}/room", response_model=SelectionResponse)
async def update_room(
    session_id: str, room: RoomData, sessions: SessionStore = Depends(get_sessions),
) -> SelectionResponse:
    """Replace the session's room snapshot."""
    session = _session_or_404(sessions, session_id)
    session.update(room)
    return _selection(session_id, session)


@router.post("/sessions/{session_id}/next", response_model=SelectionResponse)
async def next_dimension(
    session_id: str, sessions: SessionStore = Depends(get_sessions),
) -> SelectionResponse:
    """Advance to the next candidate, wrapping around."""
    session = _session_or_404(sessions, session_id)
    session.advance()
    return _selection(session_id, session)


@router.get("/sessions/{session_id}/current", response_model=SelectionResponse)
async def current_dimension(
    session_id: str, sessions: SessionStore = Depends(get_sessions),
) -> SelectionResponse:
    """The currently selected candidate."""
    return _selection(session_id, _session_or_404(sessions, session_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(
    session_id: str, sessions: SessionStore = Depends(get_sessions),
) -> None:
    try:
        sessions.delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")


@router.get("/sessions/{session_id}/drawing", response_model=DrawingResponse)
async def drawing(
    session_id: str,
    width: float = Query(800.0, gt=0),
    height: float = Query(600.0, gt=0),
    padding: float = Query(40.0, ge=0),
    sessions: SessionStore = Depends(get_sessions),
) -> DrawingResponse:
    """Screen-space walls, corners and the selected pair for a drawing surface."""
    session = _session_or_404(sessions, session_id)
    viewport = Viewport.fit(session.room, width, height, padding)

    walls = [
        ScreenSegment(start=viewport.to_screen(w.start), end=viewport.to_screen(w.end))
        for w in resolve_walls(session.room)
    ]
    corners = [viewport.to_screen(c.point) for c in session.room.corners]

    response = DrawingResponse(scale=viewport.scale, walls=walls, corners=corners)
    current = session.current()
    if current is not None:
        response.length = _selected(viewport, current.length)
        response.width = _selected(viewport, current.width)
    return response


@router.get("/sources", response_model=list[SourceInfo])
async def list_sources(service: DimensionService = Depends(get_service)) -> list[SourceInfo]:
    """List all registered candidate sources."""
    return [SourceInfo(**s) for s in service.list_sources()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
