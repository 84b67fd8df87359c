from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QGridLayout, QLabel, QSlider, QPushButton, QSizePolicy,
)

from transformviz import config
from transformviz.app.ui.panels.base import BasePanel
from transformviz.model.transform import Matrix2x2

if TYPE_CHECKING:
    from transformviz.app.state import MatrixStore, PointStore

CELLS = ((0, 0), (0, 1), (1, 0), (1, 1))


def value_to_ticks(value: float) -> int:
    """Slider position for a matrix value (QSlider works on integers)."""
    return int(round(value / config.SLIDER_STEP))


def ticks_to_value(ticks: int) -> float:
    return round(ticks * config.SLIDER_STEP, 10)


class MatrixPanel(BasePanel):
    """
    Four sliders laid out like the matrix, plus the two commands.

    Top: 2x2 grid, each cell a value label above a horizontal slider.
    Below: "Clear Plot" and "Reset Matrix" buttons.
    """
    def __init__(self, point_store: PointStore, matrix_store: MatrixStore, parent: QWidget | None = None) -> None:
        super().__init__(point_store, matrix_store, parent)

        root = QVBoxLayout(self)

        self.group = QGroupBox(self.tr("Matrix"), self)
        root.addWidget(self.group, 0)
        grid = QGridLayout(self.group)
        grid.setVerticalSpacing(8)

        self.sliders: dict[tuple[int, int], QSlider] = {}
        self.labels: dict[tuple[int, int], QLabel] = {}
        for i, j in CELLS:
            cell = QWidget(self.group)
            lay = QVBoxLayout(cell)
            lay.setContentsMargins(0, 0, 0, 0)

            label = QLabel(cell)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            lay.addWidget(label)

            slider = QSlider(Qt.Orientation.Horizontal, cell)
            slider.setRange(value_to_ticks(config.MATRIX_MIN), value_to_ticks(config.MATRIX_MAX))
            slider.setSingleStep(1)
            slider.setPageStep(10)
            slider.setMinimumWidth(140)
            slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            slider.valueChanged.connect(lambda ticks, i=i, j=j: self._on_slider_changed(i, j, ticks))
            lay.addWidget(slider)

            grid.addWidget(cell, i, j)
            self.sliders[(i, j)] = slider
            self.labels[(i, j)] = label

        buttons = QHBoxLayout()
        self.btn_clear = QPushButton(self.tr("Clear Plot"), self)
        self.btn_reset = QPushButton(self.tr("Reset Matrix"), self)
        buttons.addWidget(self.btn_clear)
        buttons.addWidget(self.btn_reset)
        root.addLayout(buttons)
        root.addStretch()

        self.btn_clear.clicked.connect(self.point_store.clear)
        self.btn_reset.clicked.connect(self.matrix_store.reset)
        self.matrix_store.matrix_changed.connect(self._sync_from_store)

        self._sync_from_store(self.matrix_store.matrix)

    def _on_slider_changed(self, i: int, j: int, ticks: int) -> None:
        self.matrix_store.set_cell(i, j, ticks_to_value(ticks))

    @Slot(object)
    def _sync_from_store(self, matrix: Matrix2x2) -> None:
        """Move sliders and labels to the store value without echoing back."""
        for (i, j), slider in self.sliders.items():
            value = matrix.cell(i, j)
            slider.blockSignals(True)
            slider.setValue(value_to_ticks(value))
            slider.blockSignals(False)
            self.labels[(i, j)].setText(f"{value + 0.0:.{config.DISPLAY_DECIMALS}f}")
