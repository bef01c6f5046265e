"""Tests for the Qt layer: store signals, frame loop, controls panel and drag surface."""

import pytest

from torquesim.app.frame_loop import FrameLoop
from torquesim.app.state import Store
from torquesim.config import INVALID_MASS_MESSAGE, SimulationSettings
from torquesim.model.integrator import RotationalIntegrator

from tests.conftest import FakeClock


@pytest.fixture
def store(qapp):
    clock = FakeClock()
    integrator = RotationalIntegrator(SimulationSettings(), disk_radius=128.0, clock=clock)
    store = Store(integrator=integrator)
    store.clock = clock
    return store


class Recorder:
    """Collects the arguments of every emission of a signal."""

    def __init__(self, signal) -> None:
        self.calls = []
        signal.connect(self)

    def __call__(self, *args) -> None:
        self.calls.append(args)


class TestStore:
    """Tests for Store."""

    def test_tick_emits_new_state(self, store):
        received = Recorder(store.state_changed)
        store.clock.advance(0.1)
        state = store.tick()
        assert received.calls == [(state,)]
        assert store.rotational_state is state

    def test_pointer_input_emits_contact_changed(self, store):
        received = Recorder(store.contact_changed)
        store.begin_drag(228.0, 128.0)
        store.move_pointer(200.0, 150.0)
        store.end_drag()
        assert len(received.calls) == 3
        assert store.integrator.is_dragging is False

    def test_advisory_emitted_on_transitions_only(self, store):
        received = Recorder(store.advisory_changed)
        store.set_disk_mass(0.0)
        store.set_disk_mass(-4.0)
        store.set_disk_mass(2.0)
        assert received.calls == [(INVALID_MASS_MESSAGE,), (None,)]
        assert store.advisory is None

    def test_settings_changes_reach_the_integrator(self, store):
        received = Recorder(store.settings_changed)
        store.set_contact_mass(2.5)
        store.set_friction_enabled(True)
        assert store.integrator.contact.mass == 2.5
        assert store.settings.friction_enabled is True
        assert len(received.calls) == 2

    def test_reset_emits_history_reset(self, store):
        store.clock.advance(0.1)
        store.tick()
        received = Recorder(store.history_reset)
        store.reset()
        assert len(received.calls) == 1
        assert len(store.integrator.history) == 0


class TestFrameLoop:
    """Tests for FrameLoop."""

    def test_start_and_stop(self, qapp):
        loop = FrameLoop(lambda: None, interval_ms=1000)
        assert loop.is_running() is False
        loop.start()
        assert loop.is_running() is True
        loop.stop()
        assert loop.is_running() is False

    def test_frame_runs_callback_and_rearms(self, qapp):
        calls = []
        loop = FrameLoop(lambda: calls.append(1), interval_ms=1000)
        loop.start()
        loop._timer.stop()  # simulate the single shot having fired

        loop._on_frame()
        assert calls == [1]
        assert loop._timer.isActive() is True
        loop.stop()

    def test_stopped_loop_does_not_tick(self, qapp):
        calls = []
        loop = FrameLoop(lambda: calls.append(1), interval_ms=1000)
        loop.start()
        loop.stop()
        loop._on_frame()
        assert calls == []
        assert loop._timer.isActive() is False

    def test_callback_may_stop_the_loop(self, qapp):
        loop = FrameLoop(lambda: loop.stop(), interval_ms=1000)
        loop.start()
        loop._on_frame()
        assert loop.is_running() is False
        assert loop._timer.isActive() is False


class TestControlsPanel:
    """Tests for the controls panel wiring."""

    def test_readouts_use_two_decimals(self, store):
        from torquesim.app.ui.panels.controls import ControlsPanel

        panel = ControlsPanel(store)
        store.integrator.state.angular_velocity = 3.14159
        store.clock.advance(0.0)
        store.tick()
        assert panel.velocity_label.text() == "Angular Velocity: 3.14 rad/s"
        assert panel.acceleration_label.text() == "Angular Acceleration: 0.00 rad/s²"

    def test_disk_mass_input_shows_advisory(self, store):
        from torquesim.app.ui.panels.controls import ControlsPanel

        panel = ControlsPanel(store)
        assert panel.advisory_label.isHidden() is True

        panel.disk_mass_spin.setValue(0.0)
        assert store.integrator.disk.mass == 0.0
        assert panel.advisory_label.isHidden() is False
        assert panel.advisory_label.text() == INVALID_MASS_MESSAGE

    def test_friction_checkbox(self, store):
        from torquesim.app.ui.panels.controls import ControlsPanel

        panel = ControlsPanel(store)
        panel.friction_check.setChecked(True)
        assert store.settings.friction_enabled is True


class TestDiskView:
    """Tests for the drag surface."""

    def test_sets_disk_radius_from_size(self, store):
        from torquesim.app.ui.disk_view import DiskView

        view = DiskView(store, diameter=200)
        assert view.radius == 100.0
        assert store.integrator.disk.radius == 100.0


def mouse_event(kind, x: float, y: float, button=None):
    """Synthetic mouse event at widget-local (x, y)."""
    from PySide6.QtCore import QEvent, QPointF, Qt
    from PySide6.QtGui import QMouseEvent

    button = Qt.MouseButton.LeftButton if button is None else button
    event_type = {
        "press": QEvent.Type.MouseButtonPress,
        "move": QEvent.Type.MouseMove,
        "release": QEvent.Type.MouseButtonRelease,
    }[kind]
    buttons = Qt.MouseButton.NoButton if kind == "release" else button
    if kind == "move":
        button = Qt.MouseButton.NoButton
    point = QPointF(x, y)
    return QMouseEvent(event_type, point, point, button, buttons, Qt.KeyboardModifier.NoModifier)


class TestDiskViewPointer:
    """Tests for press / move / release / leave on the drag surface."""

    @pytest.fixture
    def view(self, store):
        from torquesim.app.ui.disk_view import DiskView

        return DiskView(store, diameter=200)

    def test_press_on_disk_starts_drag(self, view, store):
        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        assert store.integrator.is_dragging is True
        assert store.integrator.contact.radius == pytest.approx(80.0)
        assert store.integrator.contact.previous_angle is None

    def test_right_button_press_is_ignored(self, view, store):
        from PySide6.QtCore import Qt

        view.mousePressEvent(mouse_event("press", 180.0, 100.0, Qt.MouseButton.RightButton))
        assert store.integrator.is_dragging is False
        assert store.integrator.contact.radius is None

    def test_press_in_corner_outside_disk_is_ignored(self, view, store):
        """The widget is square but only the painted circle is grabbable."""
        view.mousePressEvent(mouse_event("press", 5.0, 5.0))
        assert store.integrator.is_dragging is False
        assert store.integrator.contact.radius is None

    def test_move_on_disk_keeps_dragging(self, view, store):
        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        view.mouseMoveEvent(mouse_event("move", 100.0, 150.0))
        assert store.integrator.is_dragging is True
        assert store.integrator.contact.radius == pytest.approx(50.0)

    def test_release_ends_drag(self, view, store):
        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        view.mouseReleaseEvent(mouse_event("release", 180.0, 100.0))
        assert store.integrator.is_dragging is False
        assert store.integrator.contact.radius is None
        assert store.integrator.contact.previous_angle is None

    def test_leave_ends_drag(self, view, store):
        from PySide6.QtCore import QEvent

        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        view.leaveEvent(QEvent(QEvent.Type.Leave))
        assert store.integrator.is_dragging is False
        assert store.integrator.contact.radius is None

    def test_moving_off_disk_with_button_held_ends_drag(self, view, store):
        """A held button grabs the mouse, so leaving must be detected on move."""
        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        store.clock.advance(0.016)
        store.tick()

        view.mouseMoveEvent(mouse_event("move", 260.0, 100.0))
        assert store.integrator.is_dragging is False
        assert store.integrator.contact.radius is None
        assert store.integrator.contact.previous_angle is None
        assert store.integrator.contact.position == (260.0, 100.0)

        store.clock.advance(0.016)
        assert store.tick().angular_acceleration == 0.0

    def test_moving_into_corner_with_button_held_ends_drag(self, view, store):
        view.mousePressEvent(mouse_event("press", 180.0, 100.0))
        view.mouseMoveEvent(mouse_event("move", 195.0, 195.0))
        assert store.integrator.is_dragging is False
