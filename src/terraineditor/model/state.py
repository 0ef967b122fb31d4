"""
Project State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It owns the two editors, the brush settings and the
   generation weights in one place.
2. Decoupling: Panels write settings into this object; the paint driver and the
   generation controller read from it.

Classes:
    BrushSettingsProvider: What the paint driver reads on every tick.
    BrushSettings: The brush strength / erase / radius values set by the UI.
    GenerationWeights: The three generator weights as entered by the user.
    ProjectState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Protocol

from terraineditor import config
from terraineditor.model.contour import CanvasTransform, ContourEditor
from terraineditor.model.defaults import Defaults, load_defaults
from terraineditor.model.slope_map import SlopeMapEditor

logger = logging.getLogger(__name__)


class BrushSettingsProvider(Protocol):
    def brush_strength(self) -> float: ...
    def erase_mode(self) -> bool: ...
    def brush_radius(self) -> float: ...


@dataclass
class BrushSettings:
    strength: float = config.BRUSH_STRENGTH_DEFAULT
    erase: bool = False
    radius: float = config.BRUSH_RADIUS

    def brush_strength(self) -> float:
        return self.strength

    def erase_mode(self) -> bool:
        return self.erase

    def brush_radius(self) -> float:
        return self.radius


@dataclass
class GenerationWeights:
    growth: float = config.DEFAULT_WEIGHTS[0]
    symmetric: float = config.DEFAULT_WEIGHTS[1]
    asymmetric: float = config.DEFAULT_WEIGHTS[2]

    def as_tuple(self) -> tuple[float, float, float]:
        return self.growth, self.symmetric, self.asymmetric


@dataclass
class ProjectState:
    """
    Holds the editors and settings of the open session.
    Pass this instance to your Controllers and Views.
    """
    slope_map: SlopeMapEditor
    contour: ContourEditor
    brush: BrushSettings = field(default_factory=BrushSettings)
    weights: GenerationWeights = field(default_factory=GenerationWeights)
    contour_bound: float = config.CONTOUR_BOUND

    @classmethod
    def from_defaults(cls, defaults: Optional[Defaults] = None) -> ProjectState:
        """Build the state from the bundled default slope map and contour."""
        if defaults is None:
            defaults = load_defaults()

        slope_map = SlopeMapEditor(defaults.slope_map_size, defaults.slope_map_max, defaults.slope_map)
        transform = CanvasTransform.for_canvas(
            config.CANVAS_SIZE_PX, defaults.contour_bound, config.CONTOUR_MARGIN
        )
        contour = ContourEditor(defaults.contour, transform, hit_radius_px=config.HIT_RADIUS_PX)

        logger.info("Project state created from defaults.")
        return cls(
            slope_map=slope_map,
            contour=contour,
            weights=GenerationWeights(*defaults.weights),
            contour_bound=defaults.contour_bound,
        )
