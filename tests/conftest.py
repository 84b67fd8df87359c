from __future__ import annotations

import os

# Must be set before any Qt module creates the platform plugin
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from transformviz.app.state import MatrixStore, PointStore
from transformviz.model.geometry import CoordinateMapper


class RecordingSurface:
    """Surface that records every primitive call instead of drawing."""
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def line(self, x1, y1, x2, y2, color, width) -> None:
        self.calls.append(("line", x1, y1, x2, y2, color, width))

    def filled_circle(self, x, y, radius, color) -> None:
        self.calls.append(("filled_circle", x, y, radius, color))

    def stroked_circle(self, x, y, radius, color, width) -> None:
        self.calls.append(("stroked_circle", x, y, radius, color, width))

    def kinds(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def point_store():
    return PointStore()


@pytest.fixture
def matrix_store():
    return MatrixStore()


@pytest.fixture
def mapper():
    return CoordinateMapper(500, 500, True)


@pytest.fixture
def surface():
    return RecordingSurface()
