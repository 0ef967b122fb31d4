"""
Contour Editor (Data Model)
===========================
Closed polygon whose vertices are picked by pointer proximity and dragged.

Classes:
    CanvasTransform: Maps polygon coordinates to canvas pixels and back.
    ContourEditor: Contour points, selection state and pointer transitions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

from terraineditor.errors import MalformedBufferError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasTransform:
    """Uniform scale about the canvas midpoint."""
    scale: float
    offset: float

    @classmethod
    def for_canvas(cls, canvas_size: float, bound: float, margin: float = 1.1) -> CanvasTransform:
        """Fit [-bound, bound] into the canvas with some margin left around it."""
        return cls(scale=canvas_size / bound / margin, offset=canvas_size / 2.0)

    def to_polygon(self, px: float, py: float) -> tuple[float, float]:
        return (px - self.offset) / self.scale, (py - self.offset) / self.scale

    def to_canvas(self, x: float, y: float) -> tuple[float, float]:
        return x * self.scale + self.offset, y * self.scale + self.offset


class ContourEditor:
    """
    Owns an ordered, implicitly closed sequence of 2D points.

    Selection follows the pointer while not dragging; pressing with a vertex
    selected starts a drag, which moves that vertex with every pointer move
    until release. Release keeps the selection.
    """

    def __init__(
        self,
        points: Sequence[float],
        transform: CanvasTransform,
        hit_radius_px: float = 20.0
    ) -> None:
        flat = np.asarray(points, dtype=np.float64).ravel()
        if flat.size % 2 != 0 or flat.size < 6:
            raise MalformedBufferError("contour", flat.size, "an even length of at least 6")

        self.points: npt.NDArray[np.float64] = flat.reshape(-1, 2).copy()
        self.transform = transform
        self.hit_radius_px = hit_radius_px

        self.selected_index: Optional[int] = None
        self.is_dragging: bool = False

    # ------------------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------------------

    @property
    def n_points(self) -> int:
        return self.points.shape[0]

    @property
    def active_distance_squared(self) -> float:
        """Squared pick radius in polygon units."""
        return (self.hit_radius_px / self.transform.scale) ** 2

    # ------------------------------------------------------------------------------
    # Pointer transitions
    # ------------------------------------------------------------------------------

    def pointer_moved(self, px: float, py: float) -> bool:
        """
        Handle a pointer move at canvas pixel (px, py).

        Returns:
            True if the contour needs redrawing (vertex moved or selection changed).
        """
        x, y = self.transform.to_polygon(px, py)

        if self.is_dragging and self.selected_index is not None:
            self.move_vertex(self.selected_index, x, y)
            return True

        previous = self.selected_index
        self.selected_index = self.hit_test(x, y)
        return previous != self.selected_index

    def pointer_pressed(self) -> None:
        if self.selected_index is not None:
            self.is_dragging = True
            logger.debug(f"Dragging contour vertex {self.selected_index}.")

    def pointer_released(self) -> None:
        self.is_dragging = False

    # ------------------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------------------

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """
        Index of the first vertex (in sequence order) within the pick radius of
        the polygon-space point (x, y), or None.
        """
        d = np.sum((self.points - (x, y)) ** 2, axis=1)
        hits = np.flatnonzero(d < self.active_distance_squared)
        if hits.size == 0:
            return None
        return int(hits[0])

    def move_vertex(self, index: int, x: float, y: float) -> None:
        self.points[index, 0] = x
        self.points[index, 1] = y

    def vertex(self, index: int) -> tuple[float, float]:
        return float(self.points[index, 0]), float(self.points[index, 1])

    def canvas_points(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of vertex positions in canvas pixels."""
        return self.points * self.transform.scale + self.transform.offset

    def snapshot(self) -> list[float]:
        """Flat x, y copy of the contour, as handed to the generator."""
        return self.points.ravel().tolist()
