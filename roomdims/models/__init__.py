from .geometry import Point2D, Vector2D, direction_from_points, undirected_angle_difference
from .room import Wall, WallRef, Corner, RoomData, ResolvedWall
from .dimensions import Dimension, NormalizedDimension, RoomDimension
from .parameters import InferenceParams, InferenceConfig, InferenceMode
from .context import AnalysisContext
from .selection import SelectionCursor

__all__ = [
    "Point2D", "Vector2D", "direction_from_points", "undirected_angle_difference",
    "Wall", "WallRef", "Corner", "RoomData", "ResolvedWall",
    "Dimension", "NormalizedDimension", "RoomDimension",
    "InferenceParams", "InferenceConfig", "InferenceMode",
    "AnalysisContext",
    "SelectionCursor",
]
