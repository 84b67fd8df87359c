from transformviz.model.geometry import Point, CoordinateMapper, to_plane, to_device
from transformviz.model.transform import Matrix2x2, apply, apply_all

__all__ = ["Point", "CoordinateMapper", "to_plane", "to_device", "Matrix2x2", "apply", "apply_all"]
