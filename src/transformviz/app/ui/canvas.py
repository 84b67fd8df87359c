from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QImage, QPainter
from PySide6.QtWidgets import QWidget, QSizePolicy

from transformviz.app.render import QPainterSurface, RenderStyle, render
from transformviz.controller.interaction import InteractionController
from transformviz.model.geometry import CoordinateMapper

if TYPE_CHECKING:
    from PySide6.QtGui import QMouseEvent, QPaintEvent
    from transformviz.app.state import MatrixStore, PointStore

logger = logging.getLogger(__name__)


class TransformCanvas(QWidget):
    """
    Fixed-size drawing surface showing original and transformed points.

    The widget keeps a backing ``QImage`` that is fully redrawn whenever
    either store changes; ``paintEvent`` only copies it to the screen.
    Pointer events are forwarded to the interaction controller.
    """
    def __init__(
        self,
        point_store: PointStore,
        matrix_store: MatrixStore,
        controller: InteractionController,
        style: RenderStyle | None = None,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.point_store = point_store
        self.matrix_store = matrix_store
        self.controller = controller
        self.mapper: CoordinateMapper = controller.mapper
        self.style = style or RenderStyle()

        w, h = int(self.mapper.width), int(self.mapper.height)
        self.setFixedSize(w, h)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self._image = QImage(w, h, QImage.Format.Format_ARGB32_Premultiplied)

        self.point_store.points_changed.connect(lambda *_: self.redraw())
        self.matrix_store.matrix_changed.connect(lambda *_: self.redraw())

        self.redraw()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def image(self) -> QImage:
        """Copy of the current surface contents."""
        return self._image.copy()

    def redraw(self) -> None:
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            surface = QPainterSurface(painter, self._image.width(), self._image.height())
            render(surface, self.point_store.points, self.matrix_store.matrix, self.mapper, self.style)
        finally:
            painter.end()
        self.update()

    def sizeHint(self) -> QSize:
        return self._image.size()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.controller.press(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        # Qt grabs the mouse during a drag and sends no Leave, so check bounds here
        if not self.rect().contains(pos.toPoint()):
            self.controller.leave()
            return
        self.controller.move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.release()
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        self.controller.leave()
        super().leaveEvent(event)
