"""
Application Initialization
==========================
Constructs the model/view/controller objects and starts the Qt event loop.

It acts as the "Dependency Injection" root:
1. Instantiates the two state containers (points, matrix).
2. Instantiates the Main Window, passing the stores in.
3. Starts the event loop.

Run with: python -m transformviz
"""
from __future__ import annotations

import logging
import sys

from transformviz import config
from transformviz.app.application import create_app
from transformviz.app.state import MatrixStore, PointStore
from transformviz.app.ui.main_window import MainWindow
from transformviz.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    mode: str = config.DEFAULT_INTERACTION_MODE
) -> int:
    """Main entry point for the application."""
    setup_logging(level=level, log_file=log_file)

    app = create_app()

    point_store = PointStore()
    matrix_store = MatrixStore()

    win = MainWindow(point_store, matrix_store, mode=mode)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
