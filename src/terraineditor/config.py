"""
Configuration & Path Management
===============================
This module serves as the central registry for resource paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Editor sizes, brush limits and preview scales live in one place
   instead of being scattered through the widgets.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled resources when the app is frozen into an .exe.

Exports:
    RESOURCES_PATH (str): Absolute path to the package resources directory.
    DEFAULTS_PATH (str): Absolute path to the default slope map / contour file.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "terraineditor", relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/terraineditor/
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


# Paths
RESOURCES_PATH: str = get_resource_path("resources")
DEFAULTS_PATH: str = os.path.join(RESOURCES_PATH, "defaults.json")

# Environment variable holding a "module:function" generator path
GENERATOR_ENV_VAR = "TERRAINEDITOR_GENERATOR"

# --- Slope map editor ---
CANVAS_SIZE_PX = 400
SLOPE_MAP_SIZE = 25
SLOPE_MAP_MAX = 0.3
BRUSH_RADIUS = 4.0
PAINT_INTERVAL_MS = 50

BRUSH_STRENGTH_MIN = 0.005
BRUSH_STRENGTH_MAX = 0.02
BRUSH_STRENGTH_STEP = 0.0001
BRUSH_STRENGTH_DEFAULT = 0.017

# --- Contour editor ---
CONTOUR_BOUND = 1e5
CONTOUR_MARGIN = 1.1
HIT_RADIUS_PX = 20.0
MARKER_SIZE_PX = 6

CONTOUR_STROKE_COLOR = "#111111"
MARKER_COLOR = "#118811"
MARKER_SELECTED_COLOR = "#888811"

# --- Generation ---
DEFAULT_WEIGHTS = (0.2, 0.7, 0.1)

# --- 3D preview ---
PREVIEW_HORIZONTAL_SCALE = 0.002
PREVIEW_VERTICAL_SCALE = 0.02
ROTATION_STEP = 0.002  # radians per frame
FRAME_INTERVAL_MS = 16

CAMERA_POSITION = (0.0, 70.0, 100.0)
CAMERA_FOCAL_POINT = (0.0, 0.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)
CAMERA_VIEW_ANGLE = 75.0

RIVER_COLOR = "#0000FF"
PREVIEW_CONTOUR_COLOR = "#222222"
PREVIEW_LINE_WIDTH = 2.0
