"""
Coordinate Mapping
==================
Conversion between device (pixel) coordinates of the drawing surface and the
mathematical plane shown on it.

Device coordinates have their origin in the top-left corner with y growing
downwards. Plane coordinates are centred on the surface origin; with
``y_up=True`` (the application default) plane y grows upwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from transformviz import config


class Point(NamedTuple):
    """A point in plane coordinates."""
    x: float
    y: float


def to_plane(
    device_x: float,
    device_y: float,
    origin_x: float,
    origin_y: float,
    *,
    y_up: bool = config.Y_AXIS_UP
) -> Point:
    """
    Convert a device position to plane coordinates.

    Args:
        device_x, device_y: Pixel position on the surface.
        origin_x, origin_y: Pixel position of the plane origin.
        y_up: Flip the y-axis so that "up" on screen is positive.

    Returns:
        The corresponding plane point.
    """
    x = device_x - origin_x
    y = device_y - origin_y
    # "+ 0.0" folds negative zero from the flip
    return Point(float(x) + 0.0, float(-y if y_up else y) + 0.0)


def to_device(
    x: float,
    y: float,
    origin_x: float,
    origin_y: float,
    *,
    y_up: bool = config.Y_AXIS_UP
) -> tuple[float, float]:
    """Inverse of :func:`to_plane`."""
    dy = -y if y_up else y
    return float(x + origin_x) + 0.0, float(dy + origin_y) + 0.0


@dataclass(frozen=True)
class CoordinateMapper:
    """Mapper bound to a surface of the given size; the origin is its centre."""
    width: float = config.CANVAS_WIDTH
    height: float = config.CANVAS_HEIGHT
    y_up: bool = config.Y_AXIS_UP

    @property
    def origin(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def to_plane(self, device_x: float, device_y: float) -> Point:
        ox, oy = self.origin
        return to_plane(device_x, device_y, ox, oy, y_up=self.y_up)

    def to_device(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self.origin
        return to_device(x, y, ox, oy, y_up=self.y_up)
