"""Shared test fixtures."""

from __future__ import annotations

import os
from typing import Callable, Optional

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from terraineditor.model.contour import CanvasTransform, ContourEditor  # noqa: E402
from terraineditor.model.slope_map import SlopeMapEditor  # noqa: E402
from terraineditor.model.state import ProjectState  # noqa: E402


# A 1:1 transform keeps pixel and polygon coordinates identical
IDENTITY = CanvasTransform(scale=1.0, offset=0.0)

TRIANGLE = [0.0, 0.0, 100.0, 0.0, 0.0, 100.0]


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def slope_map() -> SlopeMapEditor:
    return SlopeMapEditor(size=25, max_value=0.3)


@pytest.fixture
def contour() -> ContourEditor:
    return ContourEditor(TRIANGLE, IDENTITY, hit_radius_px=20.0)


@pytest.fixture
def project(slope_map, contour) -> ProjectState:
    return ProjectState(slope_map=slope_map, contour=contour)


# --- 3D preview doubles ---

class FakeCamera:
    def __init__(self) -> None:
        self.position = None
        self.focal_point = None
        self.up = None
        self.view_angle = None


class FakeActor:
    def __init__(self, mesh, color: str) -> None:
        self.mesh = mesh
        self.color = color
        self.orientation = (0.0, 0.0, 0.0)


class FakePlotter:
    """Records the calls PreviewRenderer makes on a pyvista plotter."""

    def __init__(self) -> None:
        self.camera = FakeCamera()
        self.actors: list[FakeActor] = []
        self.removed: list[FakeActor] = []
        self.render_count = 0

    def add_mesh(self, mesh, color=None, **kwargs) -> FakeActor:
        actor = FakeActor(mesh, color)
        self.actors.append(actor)
        return actor

    def remove_actor(self, actor, reset_camera=False, render=True) -> bool:
        self.actors.remove(actor)
        self.removed.append(actor)
        return True

    def reset_camera_clipping_range(self) -> None:
        pass

    def render(self) -> None:
        self.render_count += 1


class ManualScheduler:
    """Frame scheduler whose frames only fire when the test says so."""

    def __init__(self) -> None:
        self.pending: list[Callable[[], None]] = []

    @property
    def request_count(self) -> int:
        return len(self.pending)

    def request_frame(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def fire(self) -> Optional[Callable[[], None]]:
        """Run the oldest pending frame, if any."""
        if not self.pending:
            return None
        callback = self.pending.pop(0)
        callback()
        return callback


@pytest.fixture
def plotter() -> FakePlotter:
    return FakePlotter()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
