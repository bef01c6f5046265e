"""
Configuration & Simulation Constants
====================================
This module serves as the central registry for physical constants and
the tunable settings of the running simulation.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (gravity, friction, scale factors)
   from being scattered throughout the physics and the UI.
2. Defaults: The UI reads its initial input values from here, and the
   integrator falls back to these values when the user enters nonsense.

Exports:
    GRAVITY (float): Gravitational acceleration used for the contact force.
    TORQUE_SCALE (float): Divisor applied to force * radius (pixels) torque.
    FRICTION_COEFFICIENT (float): Velocity-proportional damping constant.
    DEFAULT_DISK_MASS (float): Fallback disk mass for non-positive input.
    SimulationSettings: User-adjustable inputs of the simulation.
"""
from __future__ import annotations

from dataclasses import dataclass

# Physics
GRAVITY: float = 9.8
TORQUE_SCALE: float = 100.0
FRICTION_COEFFICIENT: float = 0.1
DEFAULT_DISK_MASS: float = 1.0
DEFAULT_CONTACT_MASS: float = 1.0

# Rendering / scheduling
DISK_DIAMETER_PX: int = 256
FRAME_INTERVAL_MS: int = 16  # ~60 Hz

# Chart history (~1 minute at 60 Hz)
HISTORY_CAPACITY: int = 3600

INVALID_MASS_MESSAGE: str = f"Invalid mass. Using default mass of {DEFAULT_DISK_MASS:g} kg."


@dataclass
class SimulationSettings:
    """
    Inputs the user can change while the simulation is running.

    Attributes:
        disk_mass: Disk mass in kg. Non-positive values fall back to DEFAULT_DISK_MASS.
        contact_mass: Mass of the point exerting force at the drag point, in kg.
        friction_enabled: Apply velocity-proportional damping.
        history_capacity: Maximum number of acceleration samples kept for the chart.
        lagged_samples: Chart the acceleration of the previous tick instead of
            the current one, so the chart runs one tick behind.
    """
    disk_mass: float = DEFAULT_DISK_MASS
    contact_mass: float = DEFAULT_CONTACT_MASS
    friction_enabled: bool = False
    history_capacity: int = HISTORY_CAPACITY
    lagged_samples: bool = False
