"""
Simulation State (Data Model)
=============================
This module defines the data structures mutated by the integrator.

Why is this file needed?
------------------------
1. State Management: It holds the disk, the contact point and the
   rotational state of one widget instance in one place.
2. Decoupling: Views read from these objects; only the integrator and the
   pointer handlers write to them.

Classes:
    Disk: Mass and rendered radius of the disk.
    Contact: The drag point (exists while a drag is active).
    RotationalState: Angular velocity, acceleration and rotation.
    AccelerationSample: One chart point.
    AccelerationHistory: Bounded, ordered sequence of samples.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, TYPE_CHECKING

import numpy as np

from torquesim.config import DEFAULT_CONTACT_MASS, DEFAULT_DISK_MASS, HISTORY_CAPACITY
from torquesim.model.physics import effective_disk_mass, moment_of_inertia

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Disk:
    mass: float = DEFAULT_DISK_MASS
    radius: float = 0.0

    @property
    def mass_is_valid(self) -> bool:
        return self.mass > 0

    @property
    def effective_mass(self) -> float:
        return effective_disk_mass(self.mass)

    @property
    def moment_of_inertia(self) -> float:
        return moment_of_inertia(self.mass, self.radius)


@dataclass
class Contact:
    """
    The point where the user holds the disk.

    `radius` and `previous_angle` are None while no drag is active.
    `position` is kept outside a drag as well, so the cursor marker can follow
    the pointer.
    """
    mass: float = DEFAULT_CONTACT_MASS
    radius: float | None = None
    angle: float | None = None
    previous_angle: float | None = None
    position: tuple[float, float] | None = None

    def clear(self) -> None:
        """Forget the drag (radius and angles), keep mass and pointer position."""
        self.radius = None
        self.angle = None
        self.previous_angle = None


@dataclass
class RotationalState:
    angular_velocity: float = 0.0  # rad/s
    angular_acceleration: float = 0.0  # rad/s^2
    rotation: float = 0.0  # degrees, [0, 360)


class AccelerationSample(NamedTuple):
    elapsed_time: float
    angular_acceleration: float


@dataclass
class AccelerationHistory:
    """
    Ordered acceleration samples for the live chart.

    Once `capacity` samples are stored, appending evicts the oldest one.
    """
    capacity: int = HISTORY_CAPACITY
    _samples: deque[AccelerationSample] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {self.capacity}.")
        self._samples = deque(maxlen=self.capacity)

    def append(self, sample: AccelerationSample) -> None:
        self._samples.append(sample)

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[AccelerationSample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> AccelerationSample:
        return self._samples[index]

    def times(self) -> npt.NDArray[np.float64]:
        """Elapsed times of all samples, oldest first."""
        return np.fromiter((s.elapsed_time for s in self._samples), dtype=np.float64, count=len(self._samples))

    def accelerations(self) -> npt.NDArray[np.float64]:
        """Angular accelerations of all samples, oldest first."""
        return np.fromiter(
            (s.angular_acceleration for s in self._samples), dtype=np.float64, count=len(self._samples)
        )
