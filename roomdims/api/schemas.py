"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from roomdims.models import (
    InferenceConfig, InferenceParams, Point2D, RoomData, RoomDimension,
)
from roomdims.services.viewport import DimensionLabel


class InferRequest(BaseModel):
    """Request body for the /dimensions endpoint and session creation."""
    room: RoomData
    params: InferenceParams = InferenceParams()
    config: InferenceConfig = InferenceConfig()


class InferResponse(BaseModel):
    """Ranked candidates for one room."""
    dimensions: list[RoomDimension]
    wall_count: int
    corner_count: int


class SelectionResponse(BaseModel):
    """Current cursor state of a session."""
    session_id: str
    current_index: int
    count: int
    current: RoomDimension | None = None


class ScreenSegment(BaseModel):
    start: Point2D
    end: Point2D


class SelectedSegment(ScreenSegment):
    label: DimensionLabel


class DrawingResponse(BaseModel):
    """Screen-space geometry for drawing the room and the selected pair."""
    scale: float
    walls: list[ScreenSegment]
    corners: list[Point2D]
    length: SelectedSegment | None = None
    width: SelectedSegment | None = None


class SourceInfo(BaseModel):
    id: str
    name: str
    modes: str
