"""
Demo River Generator
====================
A small deterministic stand-in for the external river generator.

Why is this file needed?
------------------------
The application is meant to drive an external generator (see
`controller.generation.load_generator`). Without one configured, this module
keeps the editors and preview usable: it draws one branch from the contour
centroid towards every contour vertex, climbing in proportion to the painted
slope it crosses. It is not a model of river formation.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from terraineditor import config
from terraineditor.errors import MalformedBufferError
from terraineditor.model.slope_map import SlopeMapSampler

logger = logging.getLogger(__name__)

SEGMENTS_PER_BRANCH = 8
HEIGHT_FACTOR = 0.1

# The slope map spans the same square as the contour canvas
_HALF_EXTENT = config.CONTOUR_BOUND * config.CONTOUR_MARGIN / 2.0


def generate_river(
    prob_growth: float,
    prob_symmetric: float,
    prob_asymmetric: float,
    slope_map: Sequence[float],
    contour: Sequence[float],
) -> list[float]:
    """
    Returns:
        Flat list of edges, six values each: (x, y, elevation) of both endpoints.
    """
    points = np.asarray(contour, dtype=np.float64).ravel()
    if points.size % 2 != 0 or points.size < 6:
        raise MalformedBufferError("contour", points.size, "an even length of at least 6")
    points = points.reshape(-1, 2)

    sampler = SlopeMapSampler(slope_map, offset=(-_HALF_EXTENT, -_HALF_EXTENT), extent=2.0 * _HALF_EXTENT)
    centroid = points.mean(axis=0)

    edges: list[float] = []
    for i, vertex in enumerate(points):
        # Growth reaches furthest, asymmetric branching alternates short and long
        reach = prob_growth + 0.75 * prob_symmetric + (0.5 if i % 2 else 1.0) * prob_asymmetric
        reach = float(np.clip(0.9 * reach, 0.05, 0.95))

        step = (vertex - centroid) * reach / SEGMENTS_PER_BRANCH
        step_length = float(np.hypot(*step))

        start = centroid
        z0 = 0.0
        for _ in range(SEGMENTS_PER_BRANCH):
            end = start + step
            z1 = z0 + step_length * sampler.sample(end[0], end[1]) * HEIGHT_FACTOR
            edges.extend((start[0], start[1], z0, end[0], end[1], z1))
            start, z0 = end, z1

    logger.debug(f"Demo generator produced {len(edges) // 6} edges.")
    return [float(v) for v in edges]
