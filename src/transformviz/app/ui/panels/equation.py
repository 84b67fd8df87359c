from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QLabel

from transformviz.app.ui.panels.base import BasePanel
from transformviz.model.equation import format_latex, format_plain
from transformviz.model.transform import Matrix2x2

if TYPE_CHECKING:
    from transformviz.app.state import MatrixStore, PointStore


class EquationPanel(BasePanel):
    """Read-only view of ``M [x y]^T`` for the current matrix."""
    def __init__(self, point_store: PointStore, matrix_store: MatrixStore, parent: QWidget | None = None) -> None:
        super().__init__(point_store, matrix_store, parent)

        root = QVBoxLayout(self)
        box = QGroupBox(self.tr("Equation"), self)
        root.addWidget(box)
        lay = QVBoxLayout(box)

        self.label = QLabel(box)
        self.label.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        lay.addWidget(self.label)
        root.addStretch()

        self.latex = ""
        self.matrix_store.matrix_changed.connect(self._refresh)
        self._refresh(self.matrix_store.matrix)

    @Slot(object)
    def _refresh(self, matrix: Matrix2x2) -> None:
        self.latex = format_latex(matrix)
        self.label.setText(format_plain(matrix))
        self.label.setToolTip(self.latex)
