"""Room dimension inference: length/width candidates from a wall graph."""

from roomdims.core.engine import DimensionEngine, infer_dimensions

__all__ = ["DimensionEngine", "infer_dimensions"]
