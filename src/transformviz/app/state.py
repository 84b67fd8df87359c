from __future__ import annotations

import logging
import math

from PySide6.QtCore import QObject, Signal

from transformviz import config
from transformviz.model.geometry import Point
from transformviz.model.transform import Matrix2x2

logger = logging.getLogger(__name__)


class PointStore(QObject):
    """
    Ordered collection of user-placed points in plane coordinates.

    Emits ``points_changed`` with the new snapshot after every mutation.
    """
    points_changed = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._points: list[Point] = []

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def add_point(self, point: tuple[float, float]) -> None:
        x, y = point
        p = Point(float(x), float(y))
        self._points.append(p)
        logger.debug("Point added at (%.1f, %.1f); %d points.", p.x, p.y, len(self._points))
        self.points_changed.emit(self.points)

    def clear(self) -> None:
        self._points = []
        logger.debug("Points cleared.")
        self.points_changed.emit(self.points)


class MatrixStore(QObject):
    """
    Holds the current 2x2 matrix.

    Cells are clamped to ``[MATRIX_MIN, MATRIX_MAX]``; ``matrix_changed``
    carries the new :class:`Matrix2x2`.
    """
    matrix_changed = Signal(object)

    def __init__(self, matrix: Matrix2x2 | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._matrix = matrix if matrix is not None else Matrix2x2.identity()

    @property
    def matrix(self) -> Matrix2x2:
        return self._matrix

    def set_cell(self, i: int, j: int, value: object) -> None:
        """
        Replace one cell.

        Malformed values are ignored and the previous cell value is kept.

        Raises:
            IndexError: If ``i`` or ``j`` is not 0 or 1.
        """
        current = self._matrix.cell(i, j)
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric value %r for cell (%d, %d).", value, i, j)
            return
        if math.isnan(number):
            logger.warning("Ignoring NaN for cell (%d, %d).", i, j)
            return

        number = min(config.MATRIX_MAX, max(config.MATRIX_MIN, number))
        if number == current:
            return

        self._matrix = self._matrix.with_cell(i, j, number)
        logger.debug("Cell (%d, %d) set to %.2f.", i, j, number)
        self.matrix_changed.emit(self._matrix)

    def reset(self) -> None:
        """Restore the identity matrix in a single update."""
        self._matrix = Matrix2x2.identity()
        logger.debug("Matrix reset to identity.")
        self.matrix_changed.emit(self._matrix)
