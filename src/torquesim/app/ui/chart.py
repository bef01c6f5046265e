"""Live chart of angular acceleration over elapsed time."""
from __future__ import annotations

import logging

import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QWidget, QVBoxLayout, QFileDialog, QMessageBox

from torquesim.app.state import Store

logger = logging.getLogger(__name__)

LINE_COLOR = '#8884d8'


class AccelerationChart(QWidget):
    """Line chart redrawn from the integrator's history after every tick."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Time (s)', color='black')
        self.plot_widget.setLabel('left', 'Angular Acceleration (rad/s²)', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setMinimumHeight(256)

        self.curve = self.plot_widget.plot([], [], pen=pg.mkPen(color=LINE_COLOR, width=2))
        layout.addWidget(self.plot_widget)

        self.store.state_changed.connect(self.refresh)
        self.store.history_reset.connect(self.refresh)

    def refresh(self, *_) -> None:
        """Push the current history into the curve."""
        history = self.store.integrator.history
        self.curve.setData(history.times(), history.accelerations(), connect="finite")

    def export_image(self) -> None:
        """Export the current chart as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save chart as image",
            "angular_acceleration.png",
            "PNG image (*.png);;JPEG image (*.jpg)"
        )

        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plot_widget.plotItem)
            exporter.parameters()['width'] = 1920
            exporter.export(file_path)
            logger.info(f"Chart exported to {file_path}")

        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, "Export error", f"Could not export the chart:\n{str(e)}")
