"""
Contour Canvas
Draws the editable contour polygon and turns pointer events into vertex drags.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter, QPainterPath, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from terraineditor import config
from terraineditor.model.contour import ContourEditor

logger = logging.getLogger(__name__)


class ContourCanvas(QWidget):
    """
    Canvas for a ContourEditor.

    Redraws only when the editor reports a change: a new selection, or a
    vertex moved by a drag.
    """
    # Emitted for every drag step with the flat contour
    contour_edited = Signal(object)

    def __init__(
        self,
        editor: ContourEditor,
        canvas_size: int = config.CANVAS_SIZE_PX,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self.editor = editor
        self.render_count: int = 0

        self._image = QImage(canvas_size, canvas_size, QImage.Format.Format_ARGB32)

        self.setFixedSize(canvas_size, canvas_size)
        self.setMouseTracking(True)

        self.render_polygon()

    @property
    def image(self) -> QImage:
        return self._image

    def render_polygon(self) -> None:
        """Draw the closed outline and one square marker per vertex."""
        self._image.fill(QColor("white"))
        pts = self.editor.canvas_points()

        painter = QPainter(self._image)

        path = QPainterPath()
        path.moveTo(QPointF(math.floor(pts[0, 0]), math.floor(pts[0, 1])))
        for x, y in pts[1:]:
            path.lineTo(QPointF(math.floor(x), math.floor(y)))
        path.closeSubpath()

        painter.setPen(QPen(QColor(config.CONTOUR_STROKE_COLOR), 1))
        painter.drawPath(path)

        half = config.MARKER_SIZE_PX // 2
        normal = QColor(config.MARKER_COLOR)
        selected = QColor(config.MARKER_SELECTED_COLOR)
        for i, (x, y) in enumerate(pts):
            color = selected if i == self.editor.selected_index else normal
            painter.fillRect(
                math.floor(x) - half, math.floor(y) - half,
                config.MARKER_SIZE_PX, config.MARKER_SIZE_PX,
                color
            )

        painter.end()
        self.render_count += 1
        self.update()

    # ---- Qt events ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self.editor.pointer_moved(pos.x(), pos.y()):
            self.render_polygon()
            if self.editor.is_dragging:
                self.contour_edited.emit(self.editor.snapshot())
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.editor.pointer_pressed()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.editor.pointer_released()
        super().mouseReleaseEvent(event)
