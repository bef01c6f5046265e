from __future__ import annotations

from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QColor, QPainter, QPen, QBrush, QMouseEvent, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget, QSizePolicy

from torquesim.app.state import Store
from torquesim.config import DISK_DIAMETER_PX
from torquesim.model.physics import contact_radius

DISK_COLOR = QColor("#d1d5db")
INDICATOR_COLOR = QColor("black")
CONTACT_COLOR = QColor("#ef4444")
CURSOR_RADIUS = 8.0


class DiskView(QWidget):
    """
    The circular drag surface.

    Pointer press / move / release / leave are forwarded to the store in
    widget-local pixel coordinates; the disk center is the widget center.
    Only presses on the disk itself start a drag, and moving off the disk
    ends it even while the button is held.
    Draws:
      - the disk with a radial indicator rotated by the current rotation,
      - a red contact line from the center to the pointer while dragging,
      - a red cursor marker at the last pointer position.
    """
    def __init__(self, store: Store, parent: QWidget | None = None, diameter: int = DISK_DIAMETER_PX) -> None:
        super().__init__(parent)
        self.store = store

        self.setFixedSize(diameter, diameter)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        # receive move events without a pressed button, for the cursor marker
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

        self.store.set_disk_radius(diameter / 2.0)
        self.store.state_changed.connect(self._on_changed)
        self.store.contact_changed.connect(self._on_changed)

    @property
    def radius(self) -> float:
        return self.width() / 2.0

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.store.set_disk_radius(self.radius)

    def contains_point(self, x: float, y: float) -> bool:
        """True if (x, y) lies on the painted disk, not just inside the square widget."""
        r = self.radius
        return contact_radius(x, y, r, r) <= r

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        if not self.contains_point(pos.x(), pos.y()):
            return
        self.setCursor(Qt.CursorShape.ClosedHandCursor)
        self.store.begin_drag(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        # The implicit grab of a pressed button keeps delivering moves from
        # outside the widget, and suppresses leaveEvent until release.
        if self.store.integrator.is_dragging and not self.contains_point(pos.x(), pos.y()):
            self.setCursor(Qt.CursorShape.OpenHandCursor)
            self.store.end_drag()
        self.store.move_pointer(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.store.end_drag()

    def leaveEvent(self, event) -> None:
        super().leaveEvent(event)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.store.end_drag()

    def paintEvent(self, event: QPaintEvent) -> None:
        r = self.radius
        center = QPointF(r, r)
        integrator = self.store.integrator
        contact = integrator.contact

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # disk
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(DISK_COLOR))
        painter.drawEllipse(center, r, r)

        # rotating indicator
        painter.save()
        painter.translate(center)
        painter.rotate(integrator.state.rotation)
        painter.setPen(QPen(INDICATOR_COLOR, 4))
        painter.drawLine(QPointF(0.0, 0.0), QPointF(0.0, -r))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(INDICATOR_COLOR))
        painter.drawEllipse(QPointF(0.0, 0.0), 4.0, 4.0)
        painter.restore()

        if contact.position is not None:
            pointer = QPointF(*contact.position)
            if integrator.is_dragging and contact.radius:
                painter.setPen(QPen(CONTACT_COLOR, 4))
                painter.drawLine(center, pointer)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(CONTACT_COLOR))
            painter.drawEllipse(pointer, CURSOR_RADIUS, CURSOR_RADIUS)

        painter.end()

    def _on_changed(self, *_) -> None:
        self.update()
