"""
Main Application Window
=======================
The primary GUI container holding the two editors, the generation controls and
the 3D preview.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the panels to the generation controller and the preview,
   and ends paint strokes / vertex drags on any pointer release.
"""
import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QMainWindow, QMessageBox, QScrollArea, QSplitter, QVBoxLayout, QWidget
)

from terraineditor.controller.generation import GenerationStats, RiverGenerationController, RiverGenerator
from terraineditor.errors import PreviewNotReadyError
from terraineditor.model.state import ProjectState
from terraineditor.view.panels.contour_panel import ContourPanel
from terraineditor.view.panels.generation_panel import GenerationControlPanel
from terraineditor.view.panels.slope_map_panel import SlopeMapPanel
from terraineditor.view.widgets.pointer_release import install_global_release
from terraineditor.view.widgets.preview_3d import PreviewWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "River Terrain Editor"


class MainWindow(QMainWindow):
    def __init__(self, project_state: ProjectState, generator: RiverGenerator) -> None:
        super().__init__()
        self.project: ProjectState = project_state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Editors and controls ---
        controls = QWidget()
        controls_layout = QVBoxLayout(controls)

        self.slope_panel = SlopeMapPanel(self.project)
        self.contour_panel = ContourPanel(self.project)
        self.generation_panel = GenerationControlPanel(self.project)

        controls_layout.addWidget(self.slope_panel)
        controls_layout.addWidget(self.contour_panel)
        controls_layout.addWidget(self.generation_panel)
        controls_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(controls)
        splitter.addWidget(scroll)

        # --- RIGHT SIDE: 3D preview ---
        self.visualizer = PreviewWidget()
        splitter.addWidget(self.visualizer)

        splitter.setSizes([460, 940])

        # --- CONTROLLERS ---
        self.generation = RiverGenerationController(self.project, generator, self.visualizer.renderer)

        # --- SIGNAL CONNECTIONS ---
        # 1. A release anywhere ends the paint stroke and the vertex drag
        self.release_filter = install_global_release(
            self.slope_panel.driver.release,
            self.project.contour.pointer_released,
            parent=self,
        )

        # 2. Generation controls
        self.generation_panel.regenerate_requested.connect(self.on_regenerate)
        self.generation_panel.toggle_render_requested.connect(self.on_toggle_render)
        self.visualizer.running_changed.connect(self.generation_panel.set_running)

        # 3. Contour drags update the preview outline
        self.contour_panel.canvas.contour_edited.connect(self.on_contour_edited)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial generation, then start rotating
        stats = self.on_regenerate()
        if stats.ok:
            self.visualizer.start_render()

    def _create_actions(self) -> None:
        self.act_regenerate = QAction("Regenerate", self)
        self.act_regenerate.setShortcut("Ctrl+R")
        self.act_regenerate.triggered.connect(self.on_regenerate)

        self.act_toggle_render = QAction("Start / Stop Rotation", self)
        self.act_toggle_render.setShortcut("Ctrl+P")
        self.act_toggle_render.triggered.connect(self.on_toggle_render)

        self.act_reset_slope = QAction("Reset Slope Map", self)
        self.act_reset_slope.triggered.connect(self.slope_panel.on_reset_clicked)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        river_menu = menu_bar.addMenu("&River")
        river_menu.addAction(self.act_regenerate)
        river_menu.addAction(self.act_toggle_render)
        river_menu.addSeparator()
        river_menu.addAction(self.act_reset_slope)

    # --- SLOTS ---

    def on_regenerate(self) -> GenerationStats:
        stats = self.generation.regenerate()
        text = stats.to_text()
        self.generation_panel.set_stats(text, is_error=not stats.ok)
        if stats.ok:
            self.visualizer.show_stats(text)
        return stats

    def on_toggle_render(self) -> None:
        try:
            self.visualizer.toggle_render()
        except PreviewNotReadyError as e:
            logger.warning(f"Cannot start the preview: {e}")
            self.visualizer.stop_render()
            QMessageBox.warning(self, "Preview", "Generate a river before starting the preview.")

    def on_contour_edited(self, contour: list) -> None:
        self.visualizer.update_contour(contour)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.slope_panel.driver.release()
        self.release_filter.uninstall()
        self.visualizer.close()
        event.accept()
