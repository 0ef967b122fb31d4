"""
3D Preview Renderer
===================
Owns the river and contour actors of the preview scene and the rotation loop.

Why is this file needed?
------------------------
1. Replacement: Each new generator result replaces the previous river actor, and
   each contour update replaces the contour actor; never both old and new at once.
2. Animation: While running, every frame schedules the next one and advances the
   shared yaw rotation. Stopping only clears the running flag; the frame that is
   already scheduled sees the flag and ends the chain. Stop is therefore eventual,
   not immediate.

Classes:
    FrameScheduler: Requests a callback at the display cadence.
    QtFrameScheduler: Single-shot QTimer implementation of FrameScheduler.
    PreviewRenderer: The scene state machine, independent of any widget.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional, Protocol, Sequence

import pyvista as pv
from PySide6.QtCore import QObject, QTimer

from terraineditor import config
from terraineditor.errors import PreviewNotReadyError
from terraineditor.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> None: ...


class QtFrameScheduler(QObject):
    """Fires the requested callback once, roughly one display frame later."""

    def __init__(self, interval_ms: int = config.FRAME_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback: Optional[Callable[[], None]] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)

    def request_frame(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class PreviewRenderer:
    """
    River segments plus contour loop, viewed through a fixed perspective camera.

    Args:
        plotter: A PyVista plotter (QtInteractor in the app).
        scheduler: Where the next animation frame is requested from.
    """

    def __init__(self, plotter: pv.Plotter, scheduler: FrameScheduler) -> None:
        self.plotter = plotter
        self.scheduler = scheduler

        # Render state
        self.is_running: bool = False
        self.rotation: float = 0.0
        self._frame_pending: bool = False

        # Actors state
        self._river_actor: Optional[Any] = None
        self._contour_actor: Optional[Any] = None

        self._configure_camera()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def has_river(self) -> bool:
        return self._river_actor is not None

    @property
    def has_contour(self) -> bool:
        return self._contour_actor is not None

    def set_river(self, buffer: Sequence[float]) -> None:
        """Replace the river actor with segments built from a flat (x, y, elevation) buffer."""
        mesh = VtkUtils.river_to_polydata(buffer)
        self._river_actor = self._replace_actor(self._river_actor, mesh, config.RIVER_COLOR)
        logger.debug(f"River mesh replaced ({mesh.n_cells} segments).")

    def set_contour(self, buffer: Sequence[float]) -> None:
        """Replace the contour actor with a closed loop built from a flat (x, y) buffer."""
        mesh = VtkUtils.contour_to_polydata(buffer)
        self._contour_actor = self._replace_actor(self._contour_actor, mesh, config.PREVIEW_CONTOUR_COLOR)

    def render(self, once: bool = False) -> None:
        """
        Draw one frame.

        Unless `once` is set, a running renderer also schedules the next frame
        and advances the rotation.

        Raises:
            PreviewNotReadyError: If the river or the contour was never set.
        """
        self._ensure_ready()

        if self.is_running and not once:
            self._schedule_next_frame()
            self.rotation += config.ROTATION_STEP

        yaw = math.degrees(self.rotation)
        self._river_actor.orientation = (0.0, yaw, 0.0)
        self._contour_actor.orientation = (0.0, yaw, 0.0)

        self.plotter.render()

    def start_render(self) -> None:
        """
        Start the rotation loop.

        Raises:
            PreviewNotReadyError: If the river or the contour was never set; the
                renderer then stays stopped.
        """
        self._ensure_ready()
        self.is_running = True
        logger.debug("Preview animation started.")
        self.render()

    def stop_render(self) -> None:
        """Clear the running flag; the already scheduled frame ends the loop."""
        self.is_running = False
        logger.debug("Preview animation stop requested.")

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _ensure_ready(self) -> None:
        if self._river_actor is None or self._contour_actor is None:
            raise PreviewNotReadyError("set_river() and set_contour() must be called before render().")

    def _configure_camera(self) -> None:
        camera = self.plotter.camera
        camera.position = config.CAMERA_POSITION
        camera.focal_point = config.CAMERA_FOCAL_POINT
        camera.up = config.CAMERA_UP
        camera.view_angle = config.CAMERA_VIEW_ANGLE

    def _replace_actor(self, old: Optional[Any], mesh: pv.PolyData, color: str) -> Any:
        if old is not None:
            self.plotter.remove_actor(old, reset_camera=False, render=False)

        actor = self.plotter.add_mesh(
            mesh,
            color=color,
            line_width=config.PREVIEW_LINE_WIDTH,
            pickable=False,
            show_scalar_bar=False,
            reset_camera=False,
            render=False,
        )
        self.plotter.reset_camera_clipping_range()
        return actor

    def _schedule_next_frame(self) -> None:
        if self._frame_pending:
            return
        self._frame_pending = True
        self.scheduler.request_frame(self._on_frame)

    def _on_frame(self) -> None:
        self._frame_pending = False
        if not self.is_running:
            logger.debug("Preview animation stopped.")
            return
        self.render()
