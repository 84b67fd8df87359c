from transformviz.app.ui.panels.base import BasePanel
from transformviz.app.ui.panels.equation import EquationPanel
from transformviz.app.ui.panels.matrix import MatrixPanel

__all__ = ["BasePanel", "EquationPanel", "MatrixPanel"]
