"""
Run with: python -m torquesim
"""
from __future__ import annotations

import logging
import sys

import pyqtgraph as pg

from torquesim.app.application import create_app
from torquesim.app.ui.main_window import MainWindow
from torquesim.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG to follow drag transitions and the frame loop
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
