"""
VTK and Geometry Utilities
Helper functions turning flat generator / contour buffers into PyVista line data.
"""
from typing import Sequence

import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

from terraineditor import config
from terraineditor.errors import MalformedBufferError

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def as_flat_array(buffer: Sequence[float]) -> npt.NDArray[np.float64]:
        return np.asarray(buffer, dtype=np.float64).ravel()

    @staticmethod
    def river_to_polydata(
        buffer: Sequence[float],
        horizontal_scale: float = config.PREVIEW_HORIZONTAL_SCALE,
        vertical_scale: float = config.PREVIEW_VERTICAL_SCALE
    ) -> pv.PolyData:
        """
        Convert a flat (x, y, elevation) buffer into independent line segments.

        Consecutive point pairs form one segment each; they are not joined into a
        path. The preview is Y-up, so elevation goes to Y and the contour-plane
        y coordinate goes to Z.

        Raises:
            MalformedBufferError: If the length is not a multiple of 6.
        """
        data = VtkUtils.as_flat_array(buffer)
        if data.size % 6 != 0:
            raise MalformedBufferError("river", data.size, "a multiple of 6 (two xyz points per edge)")

        xyz = data.reshape(-1, 3)
        n = xyz.shape[0]
        points = np.column_stack([
            xyz[:, 0] * horizontal_scale,
            xyz[:, 2] * vertical_scale,
            xyz[:, 1] * horizontal_scale,
        ])

        if n == 0:
            # PyVista refuses to plot meshes without points; one point and no cells draws nothing
            pd = pv.PolyData()
            pd.points = np.zeros((1, 3), dtype=np.float64)
            return pd

        # segment cells: [2, id0, id1] repeated
        ids = np.arange(n, dtype=np.int_).reshape(-1, 2)
        cells = np.column_stack([np.full(ids.shape[0], 2, dtype=np.int_), ids]).ravel()
        return pv.PolyData(points, lines=cells)

    @staticmethod
    def contour_to_polydata(
        buffer: Sequence[float],
        horizontal_scale: float = config.PREVIEW_HORIZONTAL_SCALE
    ) -> pv.PolyData:
        """
        Convert a flat (x, y) contour buffer into a closed loop on the ground plane.

        Raises:
            MalformedBufferError: If the length is odd or below 6.
        """
        data = VtkUtils.as_flat_array(buffer)
        if data.size % 2 != 0 or data.size < 6:
            raise MalformedBufferError("contour", data.size, "an even length of at least 6")

        xy = data.reshape(-1, 2)
        n = xy.shape[0]
        points = np.column_stack([
            xy[:, 0] * horizontal_scale,
            np.zeros(n, dtype=np.float64),
            xy[:, 1] * horizontal_scale,
        ])

        # polyline cell: [n + 1, id0, ..., id(n-1), id0]
        cells = np.hstack([[n + 1], np.arange(n, dtype=np.int_), [0]])
        return pv.PolyData(points, lines=cells)
