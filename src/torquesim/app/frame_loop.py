"""
Frame Loop
==========
Drives the simulation from the Qt event loop, one tick per display frame.

Why is this file needed?
------------------------
1. Cooperative scheduling: Each tick runs on the GUI thread and the next one
   is only scheduled after the current one has finished, so at most one tick
   is ever in flight.
2. Teardown: The owning window stops the loop when it closes; a stopped loop
   never fires again.
"""
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer

from torquesim.config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class FrameLoop(QObject):
    """Re-arming single-shot timer calling `callback` once per frame."""

    def __init__(
        self,
        callback: Callable[[], object],
        interval_ms: int = FRAME_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._callback = callback
        self._running = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_frame)

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._timer.start()
        logger.debug(f"Frame loop started ({self._timer.interval()} ms).")

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._timer.stop()
        logger.debug("Frame loop stopped.")

    def is_running(self) -> bool:
        return self._running

    def _on_frame(self) -> None:
        if not self._running:
            return
        try:
            self._callback()
        finally:
            # Re-arm only after the tick completed, unless stopped meanwhile
            if self._running:
                self._timer.start()
