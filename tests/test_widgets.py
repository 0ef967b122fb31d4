"""Tests for the 2D canvases, panels and the global release filter."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QColor, QMouseEvent
from PySide6.QtWidgets import QApplication, QWidget

from terraineditor import config
from terraineditor.controller.paint_driver import ContinuousPaintDriver
from terraineditor.view.panels.generation_panel import GenerationControlPanel
from terraineditor.view.panels.slope_map_panel import SlopeMapPanel
from terraineditor.view.widgets.contour_canvas import ContourCanvas
from terraineditor.view.widgets.pointer_release import GlobalReleaseFilter, install_global_release
from terraineditor.view.widgets.slope_map_canvas import SlopeMapCanvas


def mouse_event(kind: QEvent.Type, x: float, y: float) -> QMouseEvent:
    pos = QPointF(x, y)
    return QMouseEvent(
        kind, pos, pos,
        Qt.MouseButton.LeftButton, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier
    )


class TestSlopeMapCanvas:
    @pytest.fixture
    def canvas(self, qapp, project):
        driver = ContinuousPaintDriver(project.slope_map, project.brush)
        canvas = SlopeMapCanvas(project.slope_map, driver)
        yield canvas
        driver.release()

    def test_cell_size(self, canvas):
        assert canvas.cell_size == 16.0
        assert canvas.image.width() == config.CANVAS_SIZE_PX

    def test_raster_is_drawn_per_cell(self, canvas, project):
        project.slope_map.values[1 * 25 + 2] = 0.3
        canvas.render_raster()

        assert canvas.image.pixelColor(2 * 16 + 8, 1 * 16 + 8) == QColor(253, 253, 253)
        assert canvas.image.pixelColor(8, 8) == QColor(0, 0, 0)

    def test_move_tracks_pointer_cell(self, canvas, project):
        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 50.0, 130.0))

        assert (project.slope_map.pointer_x, project.slope_map.pointer_y) == (3, 8)

    def test_press_and_release_drive_stroke(self, canvas):
        canvas.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, 10.0, 10.0))
        assert canvas.driver.is_active

        canvas.mouseReleaseEvent(mouse_event(QEvent.Type.MouseButtonRelease, 10.0, 10.0))
        assert not canvas.driver.is_active


class TestContourCanvas:
    @pytest.fixture
    def canvas(self, qapp, contour):
        return ContourCanvas(contour)

    def test_markers_use_normal_color(self, canvas):
        assert canvas.image.pixelColor(1, 1).name() == config.MARKER_COLOR

    def test_hover_redraws_with_selected_color(self, canvas):
        count = canvas.render_count
        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 2.0, 2.0))

        assert canvas.render_count == count + 1
        assert canvas.image.pixelColor(1, 1).name() == config.MARKER_SELECTED_COLOR

    def test_move_without_change_does_not_redraw(self, canvas):
        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 200.0, 200.0))

        assert canvas.render_count == 1

    def test_drag_emits_edited_contour(self, canvas, contour):
        edited = []
        canvas.contour_edited.connect(edited.append)

        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 99.0, 0.0))
        canvas.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, 99.0, 0.0))
        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 150.0, 30.0))
        canvas.mouseReleaseEvent(mouse_event(QEvent.Type.MouseButtonRelease, 150.0, 30.0))

        assert contour.vertex(1) == (150.0, 30.0)
        assert edited[-1] == [0.0, 0.0, 150.0, 30.0, 0.0, 100.0]
        assert not contour.is_dragging


class TestGlobalReleaseFilter:
    def test_release_emits_and_passes_event_on(self, qapp):
        release_filter = GlobalReleaseFilter()
        seen = []
        release_filter.released.connect(lambda: seen.append(True))

        consumed = release_filter.eventFilter(
            release_filter, mouse_event(QEvent.Type.MouseButtonRelease, 0.0, 0.0)
        )

        assert seen == [True]
        assert consumed is False

    def test_other_events_ignored(self, qapp):
        release_filter = GlobalReleaseFilter()
        seen = []
        release_filter.released.connect(lambda: seen.append(True))

        release_filter.eventFilter(release_filter, mouse_event(QEvent.Type.MouseButtonPress, 0.0, 0.0))

        assert seen == []


class TestInstalledReleaseFilter:
    @pytest.fixture
    def interactions(self, qapp, project, contour):
        driver = ContinuousPaintDriver(project.slope_map, project.brush)
        release_filter = install_global_release(driver.release, contour.pointer_released)
        yield driver, contour
        release_filter.uninstall()
        driver.release()

    def start_both(self, driver, contour):
        driver.press()
        contour.pointer_moved(99.0, 0.0)
        contour.pointer_pressed()
        assert driver.is_active and contour.is_dragging

    def test_release_on_unrelated_widget_ends_stroke_and_drag(self, interactions):
        driver, contour = interactions
        self.start_both(driver, contour)
        elsewhere = QWidget()

        QApplication.sendEvent(elsewhere, mouse_event(QEvent.Type.MouseButtonRelease, 5.0, 5.0))

        assert not driver.is_active
        assert not contour.is_dragging

    def test_repeated_release_is_harmless(self, interactions, project):
        driver, contour = interactions
        self.start_both(driver, contour)
        elsewhere = QWidget()

        QApplication.sendEvent(elsewhere, mouse_event(QEvent.Type.MouseButtonRelease, 5.0, 5.0))
        values = project.slope_map.values.copy()
        QApplication.sendEvent(elsewhere, mouse_event(QEvent.Type.MouseButtonRelease, 5.0, 5.0))

        assert not driver.is_active
        assert not contour.is_dragging
        assert (project.slope_map.values == values).all()

    def test_uninstalled_filter_stops_listening(self, qapp, contour):
        release_filter = install_global_release(contour.pointer_released)
        release_filter.uninstall()
        contour.pointer_moved(99.0, 0.0)
        contour.pointer_pressed()

        QApplication.sendEvent(QWidget(), mouse_event(QEvent.Type.MouseButtonRelease, 5.0, 5.0))

        assert contour.is_dragging


class TestPanels:
    def test_slope_panel_writes_brush_settings(self, qapp, project):
        panel = SlopeMapPanel(project)

        panel.strength_spin.setValue(0.01)
        panel.chk_erase.setChecked(True)

        assert project.brush.strength == pytest.approx(0.01)
        assert project.brush.erase is True

    def test_strength_is_clamped_to_range(self, qapp, project):
        panel = SlopeMapPanel(project)

        panel.strength_spin.setValue(1.0)

        assert project.brush.strength == pytest.approx(config.BRUSH_STRENGTH_MAX)

    def test_slope_panel_reset(self, qapp, project):
        panel = SlopeMapPanel(project)
        project.slope_map.paint(12, 12, radius=4.0, strength=0.2)

        panel.btn_reset.click()

        assert not project.slope_map.values.any()
        assert panel.canvas.image.pixelColor(12 * 16 + 8, 12 * 16 + 8) == QColor(0, 0, 0)

    def test_generation_panel_writes_weights(self, qapp, project):
        panel = GenerationControlPanel(project)

        panel.growth_spin.setValue(1.0)
        panel.symmetric_spin.setValue(1.0)
        panel.asymmetric_spin.setValue(2.0)

        assert project.weights.as_tuple() == pytest.approx((1.0, 1.0, 2.0))

    def test_generation_panel_signals(self, qapp, project):
        panel = GenerationControlPanel(project)
        requested = []
        panel.regenerate_requested.connect(lambda: requested.append("regenerate"))
        panel.toggle_render_requested.connect(lambda: requested.append("toggle"))

        panel.btn_generate.click()
        panel.btn_render.click()

        assert requested == ["regenerate", "toggle"]

    def test_generation_panel_stats(self, qapp, project):
        panel = GenerationControlPanel(project)

        panel.set_stats("generate_river failed: boom", is_error=True)
        panel.set_running(True)

        assert panel.stats_text == "generate_river failed: boom"
        assert panel.btn_render.text() == "Stop"
