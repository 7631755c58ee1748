from .base import CandidateSource
from .aligned import AlignedWallSource
from .extreme import FixedAngleExtremeSource, PerWallExtremeSource, extreme_points, span_pair
from .triangle import TriangleSource

__all__ = [
    "CandidateSource",
    "AlignedWallSource",
    "FixedAngleExtremeSource", "PerWallExtremeSource", "extreme_points", "span_pair",
    "TriangleSource",
]
