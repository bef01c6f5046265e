"""
Rotational State Integrator
===========================
The per-tick driving loop of the simulation: pointer input becomes torque,
torque becomes angular acceleration, and acceleration is integrated
(explicit Euler, real elapsed time) into angular velocity and rotation.

The integrator is a small state machine:

    IDLE --begin_drag--> DRAGGING --end_drag--> IDLE

Pointer handlers (`begin_drag`, `move_pointer`, `end_drag`) mutate the
contact synchronously; `tick` reads whatever the last handler left behind.
"""
from __future__ import annotations

import logging
import math
import time
from enum import Enum
from typing import Callable

from torquesim.config import INVALID_MASS_MESSAGE, SimulationSettings
from torquesim.model.physics import (
    calculate_angular_acceleration,
    calculate_torque,
    contact_angle,
    contact_radius,
    wrap_rotation,
)
from torquesim.model.state import (
    AccelerationHistory,
    AccelerationSample,
    Contact,
    Disk,
    RotationalState,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class RotationalIntegrator:
    """
    Owns the disk, contact, rotational state and acceleration history
    of one widget instance.

    Args:
        settings: Initial user inputs. The object is kept and read on
            every tick, so later changes to it take effect immediately.
        disk_radius: Rendered disk radius in pixels. Positions passed to
            the pointer handlers are in the disk's local pixel frame,
            with the center at (disk_radius, disk_radius).
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        settings: SimulationSettings | None = None,
        disk_radius: float = 0.0,
        clock: Clock = time.monotonic,
    ) -> None:
        self.settings = settings if settings is not None else SimulationSettings()
        self._clock = clock

        self.disk = Disk(mass=self.settings.disk_mass, radius=disk_radius)
        self.contact = Contact(mass=self.settings.contact_mass)
        self.state = RotationalState()
        self.history = AccelerationHistory(capacity=self.settings.history_capacity)
        self.phase = DragPhase.IDLE

        self._start_time = self._clock()
        self._last_update_time = self._start_time
        self._zero_inertia_reported = False

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def center(self) -> tuple[float, float]:
        return self.disk.radius, self.disk.radius

    def set_disk_radius(self, radius: float) -> None:
        """Update the disk radius after the drag surface was resized."""
        self.disk.radius = radius

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def is_dragging(self) -> bool:
        return self.phase is DragPhase.DRAGGING

    @property
    def advisory(self) -> str | None:
        """User-facing message while the disk mass is invalid, otherwise None."""
        return None if self.disk.mass_is_valid else INVALID_MASS_MESSAGE

    def set_disk_mass(self, mass: float) -> None:
        was_valid = self.disk.mass_is_valid
        self.settings.disk_mass = mass
        self.disk.mass = mass
        if was_valid and not self.disk.mass_is_valid:
            logger.warning(f"Disk mass {mass} kg is not positive, falling back to {self.disk.effective_mass} kg.")

    def set_contact_mass(self, mass: float) -> None:
        self.settings.contact_mass = mass
        self.contact.mass = mass

    def set_friction_enabled(self, enabled: bool) -> None:
        self.settings.friction_enabled = enabled

    def begin_drag(self, x: float, y: float) -> None:
        """Pointer pressed on the disk: IDLE -> DRAGGING."""
        self.phase = DragPhase.DRAGGING
        self.contact.position = (x, y)
        cx, cy = self.center
        self.contact.radius = contact_radius(x, y, cx, cy)
        self.contact.angle = contact_angle(x, y, cx, cy)
        # No direction can be inferred from a single sample
        self.contact.previous_angle = None
        logger.debug(f"Drag started at r={self.contact.radius:.1f}px, angle={self.contact.angle:.1f}°")

    def move_pointer(self, x: float, y: float) -> None:
        """Pointer moved over the disk, pressed or not."""
        self.contact.position = (x, y)
        if not self.is_dragging:
            return
        cx, cy = self.center
        self.contact.radius = contact_radius(x, y, cx, cy)
        self.contact.angle = contact_angle(x, y, cx, cy)

    def end_drag(self) -> None:
        """Pointer released or left the disk: DRAGGING -> IDLE."""
        if self.is_dragging:
            logger.debug("Drag ended")
        self.phase = DragPhase.IDLE
        self.contact.clear()

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def _current_torque(self) -> float:
        if not self.is_dragging or self.contact.position is None:
            return 0.0

        x, y = self.contact.position
        cx, cy = self.center
        current_angle = contact_angle(x, y, cx, cy)
        torque = calculate_torque(
            current_angle,
            self.contact.previous_angle,
            self.contact.radius if self.contact.radius is not None else 0.0,
            self.contact.mass,
        )
        self.contact.angle = current_angle
        self.contact.previous_angle = current_angle
        return torque

    def tick(self, now: float | None = None) -> RotationalState:
        """
        Advance the simulation by the wall-clock time since the last tick.

        Args:
            now: Current time from the integrator's clock. Read from the
                clock when omitted.

        Returns:
            The updated rotational state.
        """
        if now is None:
            now = self._clock()
        dt = now - self._last_update_time
        self._last_update_time = now

        torque = self._current_torque()

        if self.disk.moment_of_inertia == 0.0 and not self._zero_inertia_reported:
            logger.warning("Disk radius is zero, angular acceleration is held at 0.")
            self._zero_inertia_reported = True

        previous = self.state
        angular_acceleration = calculate_angular_acceleration(
            torque,
            previous.angular_velocity,
            self.disk.mass,
            self.disk.radius,
            self.settings.friction_enabled,
        )
        angular_velocity = previous.angular_velocity + angular_acceleration * dt
        rotation = wrap_rotation(previous.rotation + angular_velocity * dt * 180.0 / math.pi)

        self.state = RotationalState(
            angular_velocity=angular_velocity,
            angular_acceleration=angular_acceleration,
            rotation=rotation,
        )

        charted = previous.angular_acceleration if self.settings.lagged_samples else angular_acceleration
        self.history.append(AccelerationSample(now - self._start_time, charted))

        return self.state

    def reset(self) -> None:
        """Return to the freshly started state, keeping the current settings."""
        self.end_drag()
        self.state = RotationalState()
        self.history = AccelerationHistory(capacity=self.settings.history_capacity)
        self._start_time = self._clock()
        self._last_update_time = self._start_time
        logger.info("Simulation reset.")
