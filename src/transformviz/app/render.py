"""
Render Pipeline
===============
Redraws the whole drawing surface from the current points and matrix.

Every cycle clears the surface, draws the axes through the plane origin, the
original points as filled markers and their images under the matrix as
outlined markers. The pipeline holds no state; transformed points are
recomputed on every call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen

from transformviz import config
from transformviz.model.geometry import CoordinateMapper, Point
from transformviz.model.transform import Matrix2x2, apply_all

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Primitive drawing operations in device coordinates."""
    def clear(self) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float) -> None: ...
    def filled_circle(self, x: float, y: float, radius: float, color: str) -> None: ...
    def stroked_circle(self, x: float, y: float, radius: float, color: str, width: float) -> None: ...


@dataclass(frozen=True)
class RenderStyle:
    axis_color: str = config.AXIS_COLOR
    axis_width: float = config.AXIS_WIDTH
    original_color: str = config.ORIGINAL_COLOR
    transformed_color: str = config.TRANSFORMED_COLOR
    transformed_width: float = config.TRANSFORMED_WIDTH
    marker_radius: float = config.MARKER_RADIUS


class QPainterSurface:
    """Adapter exposing the :class:`Surface` primitives over a ``QPainter``."""

    def __init__(self, painter: QPainter, width: int, height: int, background: str = config.BACKGROUND_COLOR):
        self._painter = painter
        self._rect = QRectF(0, 0, width, height)
        self._background = QColor(background)

    def clear(self) -> None:
        self._painter.fillRect(self._rect, self._background)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float) -> None:
        self._painter.save()
        pen = QPen(QColor(color))
        pen.setWidthF(float(width))
        self._painter.setPen(pen)
        self._painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
        self._painter.restore()

    def filled_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self._painter.save()
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(QBrush(QColor(color)))
        self._painter.drawEllipse(QPointF(x, y), radius, radius)
        self._painter.restore()

    def stroked_circle(self, x: float, y: float, radius: float, color: str, width: float) -> None:
        self._painter.save()
        pen = QPen(QColor(color))
        pen.setWidthF(float(width))
        self._painter.setPen(pen)
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawEllipse(QPointF(x, y), radius, radius)
        self._painter.restore()


def draw_axes(surface: Surface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    ox, oy = mapper.to_device(0.0, 0.0)
    surface.line(0.0, oy, float(mapper.width), oy, style.axis_color, style.axis_width)
    surface.line(ox, 0.0, ox, float(mapper.height), style.axis_color, style.axis_width)


def render(
    surface: Surface,
    points: Sequence[Point],
    matrix: Matrix2x2,
    mapper: CoordinateMapper,
    style: RenderStyle | None = None
) -> None:
    """Redraw ``surface`` for the given points and matrix."""
    style = style or RenderStyle()
    r = style.marker_radius

    surface.clear()
    draw_axes(surface, mapper, style)

    for p in points:
        dx, dy = mapper.to_device(p.x, p.y)
        surface.filled_circle(dx, dy, r, style.original_color)

    for x, y in apply_all(points, matrix):
        dx, dy = mapper.to_device(float(x), float(y))
        surface.stroked_circle(dx, dy, r, style.transformed_color, style.transformed_width)

    logger.debug("Rendered %d points.", len(points))
