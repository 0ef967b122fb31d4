"""
Continuous Paint Driver
=======================
Re-applies the slope map brush at a fixed interval while the pointer button is held.

Why is this file needed?
------------------------
1. Dwell: Painting must accumulate while the pointer rests, so paint is committed
   on a timer rather than on pointer-move events.
2. Single timer: A second press must not start a second timer, and the timer must
   stop on release no matter how many release events arrive.

Classes:
    ContinuousPaintDriver: QTimer-backed paint loop for one SlopeMapEditor.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from terraineditor import config
from terraineditor.model.slope_map import SlopeMapEditor
from terraineditor.model.state import BrushSettingsProvider

logger = logging.getLogger(__name__)


class ContinuousPaintDriver(QObject):
    """
    Paints at the editor's tracked pointer cell every `interval_ms` while active.

    Brush settings are read from the provider on each tick, so changes made
    during a stroke apply to the next tick.
    """

    def __init__(
        self,
        editor: SlopeMapEditor,
        settings: BrushSettingsProvider,
        on_painted: Optional[Callable[[], None]] = None,
        interval_ms: int = config.PAINT_INTERVAL_MS,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.editor = editor
        self.settings = settings
        self.on_painted = on_painted

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def press(self) -> None:
        """Start painting. Ignored if a stroke is already running."""
        if self._timer.isActive():
            return
        self._timer.start()
        logger.debug("Paint stroke started.")

    def release(self) -> None:
        """Stop painting. Safe to call any number of times."""
        if not self._timer.isActive():
            return
        self._timer.stop()
        logger.debug("Paint stroke finished.")

    def tick(self) -> None:
        """One brush application at the current pointer cell."""
        strength = self.settings.brush_strength()
        if self.settings.erase_mode():
            strength = -strength

        self.editor.paint(
            self.editor.pointer_x,
            self.editor.pointer_y,
            self.settings.brush_radius(),
            strength,
        )

        if self.on_painted is not None:
            self.on_painted()
