"""
Main window: canvas on the left, matrix controls and equation on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame

from transformviz import config
from transformviz.app.state import MatrixStore, PointStore
from transformviz.app.ui.canvas import TransformCanvas
from transformviz.app.ui.panels.equation import EquationPanel
from transformviz.app.ui.panels.matrix import MatrixPanel
from transformviz.controller.interaction import InteractionController, InteractionMode
from transformviz.model.geometry import CoordinateMapper

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        point_store: PointStore | None = None,
        matrix_store: MatrixStore | None = None,
        mode: InteractionMode | str = config.DEFAULT_INTERACTION_MODE
    ) -> None:
        super().__init__()
        self.setWindowTitle(config.VISIBLE_APP_NAME)

        # State containers are created here unless injected
        self.point_store = point_store if point_store is not None else PointStore(parent=self)
        self.matrix_store = matrix_store if matrix_store is not None else MatrixStore(parent=self)

        mapper = CoordinateMapper(config.CANVAS_WIDTH, config.CANVAS_HEIGHT, config.Y_AXIS_UP)
        self.controller = InteractionController(self.point_store, mapper, mode=mode)

        central = QWidget(self)
        v = QVBoxLayout(central)

        title = QLabel(self.tr(config.VISIBLE_APP_NAME), central)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = title.font()
        font.setPointSizeF(font.pointSizeF() * 1.6)
        font.setBold(True)
        title.setFont(font)
        v.addWidget(title, 0)

        h = QHBoxLayout()
        v.addLayout(h, 1)

        self.canvas = TransformCanvas(self.point_store, self.matrix_store, self.controller, parent=central)
        frame = QFrame(central)
        frame.setFrameShape(QFrame.Shape.Box)
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(1, 1, 1, 1)
        frame_layout.addWidget(self.canvas)
        h.addWidget(frame, 0, Qt.AlignmentFlag.AlignTop)

        side = QVBoxLayout()
        self.matrix_panel = MatrixPanel(self.point_store, self.matrix_store, parent=central)
        self.equation_panel = EquationPanel(self.point_store, self.matrix_store, parent=central)
        side.addWidget(self.matrix_panel, 0)
        side.addWidget(self.equation_panel, 1)
        h.addLayout(side, 1)

        self.setCentralWidget(central)

        self.statusBar()
        self.point_store.points_changed.connect(self._update_status)
        self._update_status(self.point_store.points)
        logger.info("Main window ready (%s mode).", self.controller.mode.value)

    def _update_status(self, points) -> None:
        self.statusBar().showMessage(self.tr("{n} points").format(n=len(points)))
