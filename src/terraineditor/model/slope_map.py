"""
Slope Map Editor (Data Model)
=============================
Owns the square grid of slope weights that the river generator samples, and the
radial brush used to paint it.

Why is this file needed?
------------------------
1. Invariant: every cell stays within [0, max]; all mutations clamp.
2. Decoupling: the Qt canvas only reads the raster and forwards pointer cells,
   so the brush can be exercised without a window.

Classes:
    SlopeMapEditor: Grid state, brush paint, reset and greyscale raster.
    SlopeMapSampler: Point lookup of a grid in contour coordinates.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class SlopeMapEditor:
    """
    A size x size grid of values in [0, max], stored flat and row-major
    (index = y * size + x).
    """

    def __init__(
        self,
        size: int,
        max_value: float,
        default: Optional[Sequence[float]] = None
    ) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}.")

        self.size: int = size
        self.max_value: float = float(max_value)
        self.values: npt.NDArray[np.float64] = np.zeros(size * size, dtype=np.float64)

        if default is not None:
            data = np.asarray(default, dtype=np.float64).ravel()
            if data.size != size * size:
                raise ValueError(
                    f"Default slope map has {data.size} values, expected {size * size}."
                )
            self.values[:] = np.clip(data, 0.0, self.max_value)

        # Pointer cell, tracked on every move and read by the paint driver
        self.pointer_x: int = 0
        self.pointer_y: int = 0

        # Cell coordinates, cached for the full-grid brush scan
        self._xs = np.tile(np.arange(size, dtype=np.float64), size)
        self._ys = np.repeat(np.arange(size, dtype=np.float64), size)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def paint(self, cx: float, cy: float, radius: float, strength: float) -> None:
        """
        Apply the radial brush centred on cell (cx, cy).

        Cells within unit squared distance get the full strength, cells closer
        than radius get strength / d (d = squared distance), the rest nothing.
        A negative strength erases.

        Args:
            cx: Brush centre column (may lie outside the grid).
            cy: Brush centre row (may lie outside the grid).
            radius: Brush radius in cells.
            strength: Signed amount added at the centre.
        """
        d = (cx - self._xs) ** 2 + (cy - self._ys) ** 2

        m = np.zeros_like(d)
        m[d <= 1.0] = 1.0
        falloff = (d > 1.0) & (d < radius * radius)
        m[falloff] = 1.0 / d[falloff]

        np.clip(self.values + strength * m, 0.0, self.max_value, out=self.values)

    def reset(self) -> None:
        """Zero-fill the whole grid."""
        self.values.fill(0.0)
        logger.debug("Slope map reset.")

    def render_raster(self) -> npt.NDArray[np.uint8]:
        """
        Greyscale intensity per cell as a (size, size) array indexed [y, x].

        The intensity is floor(value * 256) / max, clipped to the 8-bit range.
        """
        grey = np.floor(self.values * 256.0) / self.max_value
        return np.clip(grey, 0.0, 255.0).astype(np.uint8).reshape(self.size, self.size)

    def track_pointer(self, px: float, py: float, cell_size: float) -> None:
        """Store the cell under a pixel position. No bounds check."""
        self.pointer_x = math.floor(px / cell_size)
        self.pointer_y = math.floor(py / cell_size)

    def value_at(self, x: int, y: int) -> float:
        return float(self.values[y * self.size + x])

    def snapshot(self) -> list[float]:
        """Copy of the flat grid, as handed to the generator."""
        return self.values.tolist()


class SlopeMapSampler:
    """
    Looks up a slope grid at points given in contour coordinates.

    The grid covers the square [offset, offset + extent) on both axes; points
    outside it sample as 0.0.
    """

    def __init__(self, values: Sequence[float], offset: tuple[float, float], extent: float) -> None:
        data = np.asarray(values, dtype=np.float64).ravel()
        size = int(round(math.sqrt(data.size)))
        if size * size != data.size:
            raise ValueError(f"Slope map of length {data.size} is not square.")

        self.values = data
        self.size = size
        self.offset = offset
        self.inv_extent = 1.0 / extent

    def sample(self, x: float, y: float) -> float:
        u = (x - self.offset[0]) * self.inv_extent
        v = (y - self.offset[1]) * self.inv_extent

        if u < 0.0 or u >= 1.0 or v < 0.0 or v >= 1.0:
            return 0.0

        col = int(u * self.size)
        row = int(v * self.size)
        return float(self.values[col + row * self.size])
