from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    from transformviz.app.state import MatrixStore, PointStore


class BasePanel(QWidget):
    """Base class for the control panels. Holds references to both stores."""
    def __init__(self, point_store: PointStore, matrix_store: MatrixStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.point_store = point_store
        self.matrix_store = matrix_store
