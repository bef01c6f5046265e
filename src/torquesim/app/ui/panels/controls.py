from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout,
    QSizePolicy, QDoubleSpinBox, QCheckBox
)

from torquesim.app.state import Store
from torquesim.app.ui.panels.base import BasePanel
from torquesim.model.state import RotationalState


def format_velocity(value: float) -> str:
    return f"Angular Velocity: {value:.2f} rad/s"


def format_acceleration(value: float) -> str:
    return f"Angular Acceleration: {value:.2f} rad/s²"


class ControlsPanel(BasePanel):
    """
    Panel with the simulation inputs and the numeric readouts.

    Top: disk mass, contact mass and the friction toggle.
    Below: angular velocity and acceleration of the last tick.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # ---- inputs ----
        inputs = QGroupBox(self.tr("Parameters"), self)
        root.addWidget(inputs, 0)
        self.grid = QGridLayout(inputs)
        self.grid.setVerticalSpacing(8)
        self._row = 0

        settings = store.settings
        self.disk_mass_spin = self._add_spin("Disk Mass:", default=settings.disk_mass, suffix="kg")
        self.advisory_label = QLabel(self)
        self.advisory_label.setStyleSheet("color: #ef4444;")
        self.advisory_label.setWordWrap(True)
        self.grid.addWidget(self.advisory_label, self._next_row(), 0, 1, 2)

        self.contact_mass_spin = self._add_spin("Cursor Mass:", default=settings.contact_mass, suffix="kg")

        self.friction_check = QCheckBox(self.tr("Enable Friction"), self)
        self.friction_check.setChecked(settings.friction_enabled)
        self.grid.addWidget(self.friction_check, self._next_row(), 0, 1, 2)

        # ---- readouts ----
        readouts = QGroupBox(self.tr("Disk"), self)
        root.addWidget(readouts, 0)
        readout_layout = QVBoxLayout(readouts)
        self.velocity_label = QLabel(readouts)
        self.acceleration_label = QLabel(readouts)
        readout_layout.addWidget(self.velocity_label)
        readout_layout.addWidget(self.acceleration_label)

        root.addStretch()

        # wiring
        self.disk_mass_spin.valueChanged.connect(self.store.set_disk_mass)
        self.contact_mass_spin.valueChanged.connect(self.store.set_contact_mass)
        self.friction_check.toggled.connect(self.store.set_friction_enabled)
        self.store.advisory_changed.connect(self._on_advisory_changed)
        self.store.state_changed.connect(self._on_state_changed)

        self._on_advisory_changed(self.store.advisory)
        self._on_state_changed(self.store.rotational_state)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        label: str,
        *,
        min_value: float = -1e6,
        max_value: float = 1e6,
        step: float = 0.1,
        default: float = 0.0,
        suffix: str = "",
        decimals: int = 2
    ) -> QDoubleSpinBox:
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        if suffix:
            w.setSuffix(f" {suffix}")
        self.grid.addWidget(w, row, 1)
        return w

    # ---- slots ----

    @Slot(object)
    def _on_advisory_changed(self, advisory: str | None) -> None:
        self.advisory_label.setText(self.tr(advisory) if advisory else "")
        self.advisory_label.setVisible(bool(advisory))

    @Slot(object)
    def _on_state_changed(self, state: RotationalState) -> None:
        self.velocity_label.setText(format_velocity(state.angular_velocity))
        self.acceleration_label.setText(format_acceleration(state.angular_acceleration))
