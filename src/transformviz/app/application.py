from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os
import logging

from transformviz import config

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or reuse a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(config.ORG_ID)
    QCoreApplication.setApplicationName(config.APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)
    else:
        logger.debug("Reusing existing QApplication instance.")

    visible_name = QCoreApplication.translate("App", config.VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
