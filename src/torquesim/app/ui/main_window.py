"""
Main Application Window
=======================
The primary GUI container: controls on the left, the disk and the live
chart on the right, and a small Simulation menu.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Lifetime: It owns the store and the frame loop, and stops the loop when
   the window closes.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QMainWindow, QSplitter, QWidget, QVBoxLayout

from torquesim.app.application import VISIBLE_APP_NAME
from torquesim.app.frame_loop import FrameLoop
from torquesim.app.state import Store
from torquesim.app.ui.chart import AccelerationChart
from torquesim.app.ui.disk_view import DiskView
from torquesim.app.ui.panels.controls import ControlsPanel
from torquesim.config import SimulationSettings

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: SimulationSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1000, 700)

        # Global store
        self.store = Store(settings)

        # ---- Central: controls | (disk over chart) ----
        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.setChildrenCollapsible(False)

        self.controls = ControlsPanel(self.store, parent=splitter)

        right = QWidget(splitter)
        v = QVBoxLayout(right)
        self.disk_view = DiskView(self.store, parent=right)
        v.addWidget(self.disk_view, 0, Qt.AlignmentFlag.AlignHCenter)
        self.chart = AccelerationChart(self.store, parent=right)
        v.addWidget(self.chart, 1)

        splitter.addWidget(self.controls)
        splitter.addWidget(right)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self._create_actions()
        self._create_menus()

        self.frame_loop = FrameLoop(self.store.tick, parent=self)
        self.frame_loop.start()

    def _create_actions(self) -> None:
        self.act_reset = QAction(self.tr("Reset"), self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.store.reset)

        self.act_export = QAction(self.tr("Export Chart..."), self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.chart.export_image)

        self.act_exit = QAction(self.tr("Quit"), self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu = self.menuBar().addMenu(self.tr("&Simulation"))
        menu.addAction(self.act_reset)
        menu.addAction(self.act_export)
        menu.addSeparator()
        menu.addAction(self.act_exit)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.frame_loop.stop()
        logger.info("Main window closed.")
        super().closeEvent(event)
