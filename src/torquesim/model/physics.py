"""
Rotational Physics
==================
Pure functions turning a drag gesture into torque, and torque into
angular acceleration of a uniform solid disk.

The torque model is illustrative rather than physically calibrated:
the contact "force" is the weight of the contact mass, and only the
direction of the drag (clockwise / counter-clockwise) is taken from
the pointer motion.

Functions:
    contact_angle: Angle of a point around the disk center, in degrees.
    contact_radius: Distance of a point from the disk center.
    calculate_torque: Signed torque from two successive contact angles.
    effective_disk_mass: Disk mass with the non-positive fallback applied.
    moment_of_inertia: I = m * r^2 / 2 for a solid disk.
    calculate_angular_acceleration: torque / I, optionally damped.
    wrap_rotation: Wrap an angle in degrees into [0, 360).
"""
from __future__ import annotations

import math

from torquesim.config import (
    DEFAULT_DISK_MASS,
    FRICTION_COEFFICIENT,
    GRAVITY,
    TORQUE_SCALE,
)


def contact_angle(x: float, y: float, center_x: float, center_y: float) -> float:
    """Angle of (x, y) around the center in degrees, in the range -180..180.

    Screen coordinates are used as-is (y grows downwards), so a positive
    change of angle is a clockwise motion on screen.
    """
    return math.degrees(math.atan2(y - center_y, x - center_x))


def contact_radius(x: float, y: float, center_x: float, center_y: float) -> float:
    """Distance of (x, y) from the center."""
    return math.hypot(x - center_x, y - center_y)


def drag_direction(current_angle: float, previous_angle: float) -> int:
    """
    Direction of the shortest rotation from `previous_angle` to `current_angle`.

    Returns +1 when the forward wraparound delta is at most 180 degrees,
    otherwise -1 (the short way round is backwards).
    """
    delta = (current_angle - previous_angle + 360.0) % 360.0
    return 1 if delta <= 180.0 else -1


def calculate_torque(
    current_angle: float,
    previous_angle: float | None,
    radius: float,
    contact_mass: float,
) -> float:
    """
    Torque exerted by the contact mass dragged from `previous_angle` to `current_angle`.

    Args:
        current_angle: Current contact angle in degrees.
        previous_angle: Contact angle of the previous tick, or None if no
            direction can be established yet.
        radius: Contact radius from the disk center (pixels).
        contact_mass: Mass exerting the force (kg).

    Returns:
        Signed torque. Exactly 0.0 when `previous_angle` is None.
    """
    if previous_angle is None:
        return 0.0
    direction = drag_direction(current_angle, previous_angle)
    force = contact_mass * GRAVITY
    return direction * force * radius / TORQUE_SCALE


def effective_disk_mass(mass: float) -> float:
    """Return `mass`, or the default mass if it is not positive."""
    return mass if mass > 0 else DEFAULT_DISK_MASS


def moment_of_inertia(mass: float, radius: float) -> float:
    """Moment of inertia of a uniform solid disk about its center."""
    return effective_disk_mass(mass) * radius ** 2 / 2.0


def calculate_angular_acceleration(
    torque: float,
    angular_velocity: float,
    disk_mass: float,
    disk_radius: float,
    friction_enabled: bool = False,
) -> float:
    """
    Angular acceleration of the disk under `torque`.

    With friction enabled a damping torque -c * omega * I is added, which
    always opposes the current angular velocity.

    A disk of zero radius has no inertia; 0.0 is returned in that case
    instead of a division by zero.
    """
    moment = moment_of_inertia(disk_mass, disk_radius)
    if moment == 0.0:
        return 0.0

    angular_acceleration = torque / moment

    if friction_enabled:
        friction_torque = -FRICTION_COEFFICIENT * angular_velocity * moment
        angular_acceleration += friction_torque / moment

    return angular_acceleration


def wrap_rotation(degrees: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    wrapped = degrees % 360.0
    # -1e-20 % 360.0 rounds to 360.0 in floating point
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped
