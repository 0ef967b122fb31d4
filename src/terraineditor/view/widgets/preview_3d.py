"""
3D Preview Widget (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent, QResizeEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QStyle, QVBoxLayout, QWidget
from pyvistaqt import QtInteractor
from vtkmodules.vtkRenderingCore import vtkTextActor

from terraineditor.view.renderer import PreviewRenderer, QtFrameScheduler

logger = logging.getLogger(__name__)


class PreviewWidget(QWidget):
    """
    Hosts the QtInteractor, the PreviewRenderer driving it and a floating
    play / pause button for the rotation loop.
    """
    running_changed = Signal(bool)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)
        self.plotter.set_background("white")

        self.scheduler = QtFrameScheduler(parent=self)
        self.renderer = PreviewRenderer(self.plotter, self.scheduler)

        self._setup_overlay_controls()
        self._setup_stats_overlay()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self.renderer.is_running

    def update_contour(self, contour: Sequence[float]) -> None:
        """Swap in an edited contour; redraws at once when the loop is not running."""
        self.renderer.set_contour(contour)
        if self.renderer.has_river and not self.renderer.is_running:
            self.renderer.render(once=True)

    def show_stats(self, text: str) -> None:
        """Write the last generation summary into the lower-left corner of the view."""
        self._stats_actor.SetInput(text)
        self.plotter.render()

    def start_render(self) -> None:
        if self.renderer.is_running:
            return
        self.renderer.start_render()
        self._sync_button()

    def stop_render(self) -> None:
        self.renderer.stop_render()
        self._sync_button()

    def toggle_render(self) -> None:
        if self.renderer.is_running:
            self.stop_render()
        else:
            self.start_render()

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _setup_overlay_controls(self) -> None:
        """Floating play / pause button."""
        self.overlay_widget = QFrame(self)
        self.overlay_widget.setStyleSheet("""
            QFrame { background-color: rgba(255, 255, 255, 200); border-radius: 6px; border: 1px solid #ccc; }
            QPushButton { background-color: transparent; border: none; padding: 4px; }
            QPushButton:checked { background-color: rgba(0, 120, 215, 50); border: 1px solid #0078D7; border-radius: 3px; }
            QPushButton:hover { background-color: rgba(0, 0, 0, 10); }
        """)

        layout = QHBoxLayout(self.overlay_widget)
        layout.setContentsMargins(4, 4, 4, 4)

        self.btn_run = QPushButton()
        self.btn_run.setCheckable(True)
        self.btn_run.setChecked(False)
        self.btn_run.clicked.connect(self._on_run_clicked)
        layout.addWidget(self.btn_run)

        self._sync_button()
        self.overlay_widget.adjustSize()
        self.overlay_widget.move(8, 8)

    def _setup_stats_overlay(self) -> None:
        self._stats_actor = vtkTextActor()
        self._stats_actor.SetInput("")
        self._stats_actor.GetTextProperty().SetColor(0, 0, 0)
        self._stats_actor.GetTextProperty().SetFontSize(12)
        self._stats_actor.GetTextProperty().SetFontFamilyToCourier()
        self._stats_actor.SetDisplayPosition(10, 10)
        self.plotter.renderer.AddActor2D(self._stats_actor)

    def _sync_button(self) -> None:
        running = self.renderer.is_running
        icon = QStyle.StandardPixmap.SP_MediaPause if running else QStyle.StandardPixmap.SP_MediaPlay
        self.btn_run.blockSignals(True)
        self.btn_run.setChecked(running)
        self.btn_run.blockSignals(False)
        self.btn_run.setIcon(self.style().standardIcon(icon))
        self.btn_run.setToolTip("Stop rotation" if running else "Start rotation")
        self.running_changed.emit(running)

    def _on_run_clicked(self, checked: bool) -> None:
        try:
            if checked:
                self.start_render()
            else:
                self.stop_render()
        except Exception as e:
            logger.exception(f"Preview could not be started: {e}")
            self.renderer.stop_render()
            self._sync_button()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.overlay_widget.raise_()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.renderer.stop_render()
        self.scheduler.cancel()
        self.plotter.close()
        event.accept()
