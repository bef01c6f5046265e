from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from torquesim.config import SimulationSettings
from torquesim.model.integrator import RotationalIntegrator
from torquesim.model.state import RotationalState

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/view sync.

    The store owns the integrator. Panels and views never touch the
    integrator directly for writes; they call the store, which forwards
    the change and notifies every listener.
    """
    state_changed = Signal(object)  # RotationalState, after every tick
    contact_changed = Signal()  # pointer moved, drag started or ended
    advisory_changed = Signal(object)  # str | None
    settings_changed = Signal(object)  # SimulationSettings
    history_reset = Signal()

    def __init__(self, settings: SimulationSettings | None = None, integrator: RotationalIntegrator | None = None) -> None:
        super().__init__()
        self.integrator = integrator if integrator is not None else RotationalIntegrator(settings)
        self._advisory = self.integrator.advisory

    # ---- read access ----

    @property
    def settings(self) -> SimulationSettings:
        return self.integrator.settings

    @property
    def rotational_state(self) -> RotationalState:
        return self.integrator.state

    @property
    def advisory(self) -> str | None:
        return self._advisory

    # ---- settings ----

    def set_disk_mass(self, mass: float) -> None:
        self.integrator.set_disk_mass(mass)
        self.settings_changed.emit(self.settings)
        self._refresh_advisory()

    def set_contact_mass(self, mass: float) -> None:
        self.integrator.set_contact_mass(mass)
        self.settings_changed.emit(self.settings)

    def set_friction_enabled(self, enabled: bool) -> None:
        self.integrator.set_friction_enabled(enabled)
        self.settings_changed.emit(self.settings)

    def set_disk_radius(self, radius: float) -> None:
        self.integrator.set_disk_radius(radius)

    def _refresh_advisory(self) -> None:
        advisory = self.integrator.advisory
        if advisory != self._advisory:
            self._advisory = advisory
            self.advisory_changed.emit(advisory)

    # ---- pointer input ----

    def begin_drag(self, x: float, y: float) -> None:
        self.integrator.begin_drag(x, y)
        self.contact_changed.emit()

    def move_pointer(self, x: float, y: float) -> None:
        self.integrator.move_pointer(x, y)
        self.contact_changed.emit()

    def end_drag(self) -> None:
        self.integrator.end_drag()
        self.contact_changed.emit()

    # ---- simulation ----

    def tick(self) -> RotationalState:
        state = self.integrator.tick()
        self.state_changed.emit(state)
        return state

    def reset(self) -> None:
        self.integrator.reset()
        self.history_reset.emit()
        self.state_changed.emit(self.integrator.state)
        self.contact_changed.emit()
