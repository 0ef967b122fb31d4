"""
Default Inputs
==============
Loads the bundled default slope map, contour and generation weights.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from terraineditor import config

logger = logging.getLogger(__name__)


@dataclass
class Defaults:
    slope_map_size: int
    slope_map_max: float
    slope_map: list[float]
    contour_bound: float
    contour: list[float]
    weights: tuple[float, float, float]


def load_defaults(path: Optional[str] = None) -> Defaults:
    """
    Read a defaults file, the bundled resources/defaults.json unless `path` is given.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If it is not valid JSON or lacks a section.
    """
    source = Path(path or config.DEFAULTS_PATH)
    data = json.loads(source.read_text(encoding="utf-8"))

    try:
        slope = data["slope_map"]
        contour = data["contour"]
        weights = data["weights"]
    except KeyError as e:
        raise ValueError(f"Defaults file {source} has no {e} section.") from e

    defaults = Defaults(
        slope_map_size=int(slope["size"]),
        slope_map_max=float(slope["max"]),
        slope_map=[float(v) for v in slope["values"]],
        contour_bound=float(contour["bound"]),
        contour=[float(v) for v in contour["points"]],
        weights=(float(weights["growth"]), float(weights["symmetric"]), float(weights["asymmetric"])),
    )
    logger.debug(
        f"Loaded defaults: {defaults.slope_map_size}x{defaults.slope_map_size} slope map, "
        f"{len(defaults.contour) // 2} contour points."
    )
    return defaults
