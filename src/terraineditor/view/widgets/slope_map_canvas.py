"""
Slope Map Canvas
Greyscale view of the slope map grid that feeds pointer input to the paint driver.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from terraineditor import config
from terraineditor.controller.paint_driver import ContinuousPaintDriver
from terraineditor.model.slope_map import SlopeMapEditor

logger = logging.getLogger(__name__)


class SlopeMapCanvas(QWidget):
    """
    Square canvas, one filled square per grid cell.

    The raster is redrawn only by `render_raster()`; the driver calls it after
    each paint tick and the panel after a reset.
    """

    def __init__(
        self,
        editor: SlopeMapEditor,
        driver: ContinuousPaintDriver,
        canvas_size: int = config.CANVAS_SIZE_PX,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self.editor = editor
        self.driver = driver
        self.cell_size: float = canvas_size / editor.size

        self._image = QImage(canvas_size, canvas_size, QImage.Format.Format_RGB32)
        self._image.fill(QColor("black"))

        self.setFixedSize(canvas_size, canvas_size)
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self.render_raster()

    @property
    def image(self) -> QImage:
        return self._image

    def render_raster(self) -> None:
        """Repaint every cell of the backing image from the grid values."""
        grey = self.editor.render_raster()
        cell = self.cell_size

        painter = QPainter(self._image)
        for y in range(self.editor.size):
            for x in range(self.editor.size):
                v = int(grey[y, x])
                painter.fillRect(QRectF(x * cell, y * cell, cell, cell), QColor(v, v, v))
        painter.end()

        self.update()

    # ---- Qt events ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.editor.track_pointer(pos.x(), pos.y(), self.cell_size)
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.editor.track_pointer(pos.x(), pos.y(), self.cell_size)
            self.driver.press()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.driver.release()
        super().mouseReleaseEvent(event)
