"""
River Generation Controller
===========================
Glue between the editors, the external river generator and the 3D preview.

Why is this file needed?
------------------------
1. Boundary: The generator is an opaque callable. This module loads it, feeds it
   normalised weights plus snapshots of the slope map and contour, and times it.
2. Fault isolation: A failing generator must not take the preview loop down;
   any fault at the generator boundary becomes a GenerationError, which
   is logged and reported through the stats text instead.

Classes:
    RiverGenerator: The generator call signature.
    GenerationStats: Timing and summary figures of one generation run.
    RiverGenerationController: Runs one generation and forwards the result.
"""
from __future__ import annotations

import importlib
import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import numpy as np

from terraineditor.errors import GenerationError, MalformedBufferError
from terraineditor.model.state import ProjectState

logger = logging.getLogger(__name__)


class RiverGenerator(Protocol):
    def __call__(
        self,
        prob_growth: float,
        prob_symmetric: float,
        prob_asymmetric: float,
        slope_map: Sequence[float],
        contour: Sequence[float],
    ) -> Sequence[float]: ...


class PreviewSink(Protocol):
    def set_river(self, buffer: Sequence[float]) -> None: ...
    def set_contour(self, buffer: Sequence[float]) -> None: ...
    def render(self, once: bool = False) -> None: ...


def normalize_weights(growth: float, symmetric: float, asymmetric: float) -> tuple[float, float, float]:
    """
    Scale the three weights so they sum to 1.

    Raises:
        ValueError: If the weights do not sum to a positive, finite number.
    """
    total = growth + symmetric + asymmetric
    if not math.isfinite(total) or total <= 0.0:
        raise ValueError(f"Generation weights must sum to a positive value, got {total}.")
    return growth / total, symmetric / total, asymmetric / total


def load_generator(path: str) -> RiverGenerator:
    """
    Import a generator from a "package.module:function" path.

    Raises:
        GenerationError: If the path is malformed or does not resolve to a callable.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise GenerationError(f"Generator path '{path}' must look like 'package.module:function'.")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GenerationError(f"Cannot import generator module '{module_name}': {e}") from e

    generator = getattr(module, attr, None)
    if not callable(generator):
        raise GenerationError(f"'{attr}' in module '{module_name}' is not callable.")

    logger.info(f"Using river generator {path}.")
    return generator


@dataclass
class GenerationStats:
    duration_ms: float = 0.0
    edge_count: int = 0
    highest_point: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_text(self) -> str:
        if self.error is not None:
            return f"generate_river failed: {self.error}"

        highest = "-" if self.highest_point is None else f"{round(self.highest_point)}m"
        return "\n".join([
            f"generate_river: {round(self.duration_ms)}ms",
            f"river_edges: {self.edge_count}",
            f"highest_point: {highest}",
        ])


class RiverGenerationController:
    """Runs the generator on the current editor state and updates the preview."""

    def __init__(self, project: ProjectState, generator: RiverGenerator, preview: PreviewSink) -> None:
        self.project = project
        self.generator = generator
        self.preview = preview

    def regenerate(self) -> GenerationStats:
        """
        Generate a river network from the current slope map and contour.

        Returns:
            Stats of the run; on failure `error` holds the message and the
            preview keeps its previous geometry.
        """
        try:
            weights = normalize_weights(*self.project.weights.as_tuple())
        except ValueError as e:
            logger.warning(f"Invalid generation weights: {e}")
            return GenerationStats(error=str(e))

        slope_map = self.project.slope_map.snapshot()
        contour = self.project.contour.snapshot()

        logger.info(f"Generating river with weights ({weights[0]:.3f}, {weights[1]:.3f}, {weights[2]:.3f}).")
        start = time.perf_counter()
        try:
            buffer = self.run_generator(weights, slope_map, contour)
        except GenerationError as e:
            logger.error(f"River generation failed: {e}")
            return GenerationStats(duration_ms=(time.perf_counter() - start) * 1000.0, error=str(e))
        duration_ms = (time.perf_counter() - start) * 1000.0

        try:
            self.preview.set_river(buffer)
            self.preview.set_contour(contour)
        except MalformedBufferError as e:
            logger.error(f"Generator returned unusable geometry: {e}")
            return GenerationStats(duration_ms=duration_ms, error=str(e))

        self.preview.render(once=True)

        stats = GenerationStats(
            duration_ms=duration_ms,
            edge_count=buffer.size // 6,
            highest_point=self.highest_point(buffer),
        )
        logger.info(f"Generated {stats.edge_count} river edges in {duration_ms:.1f} ms.")
        return stats

    def run_generator(
        self, weights: tuple[float, float, float], slope_map: list[float], contour: list[float]
    ) -> np.ndarray:
        """
        Call the generator and return its result as a flat float64 array.

        Raises:
            GenerationError: If the generator raises, or returns something that is
                not a finite numeric buffer. The original exception is chained.
        """
        try:
            river = self.generator(*weights, slope_map, contour)
        except Exception as e:
            logger.exception("River generator raised")
            raise GenerationError(f"{type(e).__name__}: {e}") from e

        try:
            buffer = np.asarray(river, dtype=np.float64).ravel()
        except (TypeError, ValueError) as e:
            raise GenerationError(f"non-numeric result ({e})") from e

        if not np.isfinite(buffer).all():
            bad = int(np.count_nonzero(~np.isfinite(buffer)))
            raise GenerationError(f"result holds {bad} non-finite coordinate(s)")
        return buffer

    @staticmethod
    def highest_point(buffer: np.ndarray) -> Optional[float]:
        """Maximum elevation, i.e. the maximum of every third value."""
        elevations = buffer[2::3]
        if elevations.size == 0:
            return None
        return float(elevations.max())
