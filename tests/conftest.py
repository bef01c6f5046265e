"""Shared pytest fixtures for torquesim tests."""

import os

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from torquesim.config import SimulationSettings
from torquesim.model.integrator import RotationalIntegrator


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> SimulationSettings:
    """Default settings: 1 kg disk, 1 kg contact, no friction."""
    return SimulationSettings()


@pytest.fixture
def integrator(settings, clock) -> RotationalIntegrator:
    """Integrator for a 256 px disk (radius 128) driven by the fake clock."""
    return RotationalIntegrator(settings, disk_radius=128.0, clock=clock)


# =============================================================================
# Qt Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
