"""
Slope Map Panel
"""
import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox, QDoubleSpinBox, QFormLayout, QGroupBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget
)

from terraineditor import config
from terraineditor.controller.paint_driver import ContinuousPaintDriver
from terraineditor.model.state import ProjectState
from terraineditor.view.widgets.slope_map_canvas import SlopeMapCanvas

logger = logging.getLogger(__name__)


class SlopeMapPanel(QWidget):
    def __init__(self, project_state: ProjectState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.project = project_state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Slope Map")
        grp_layout = QVBoxLayout(grp)

        # The canvas is created after the driver so the driver can repaint it
        self.driver = ContinuousPaintDriver(
            self.project.slope_map,
            self.project.brush,
            on_painted=self._on_painted,
            parent=self
        )
        self.canvas = SlopeMapCanvas(self.project.slope_map, self.driver)
        grp_layout.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignHCenter)

        # --- Brush settings ---
        form = QFormLayout()

        self.strength_spin = QDoubleSpinBox()
        self.strength_spin.setDecimals(4)
        self.strength_spin.setRange(config.BRUSH_STRENGTH_MIN, config.BRUSH_STRENGTH_MAX)
        self.strength_spin.setSingleStep(config.BRUSH_STRENGTH_STEP)
        self.strength_spin.setValue(self.project.brush.strength)
        self.strength_spin.valueChanged.connect(self.on_strength_changed)
        form.addRow("Brush strength:", self.strength_spin)

        self.chk_erase = QCheckBox("")
        self.chk_erase.setChecked(self.project.brush.erase)
        self.chk_erase.toggled.connect(self.on_erase_toggled)
        form.addRow("Erase:", self.chk_erase)

        grp_layout.addLayout(form)

        # --- Actions ---
        btn_row = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        btn_row.addWidget(self.btn_reset)
        btn_row.addStretch()
        grp_layout.addLayout(btn_row)

        layout.addWidget(grp)

    # --- SLOTS ---

    def on_strength_changed(self, value: float) -> None:
        self.project.brush.strength = value

    def on_erase_toggled(self, checked: bool) -> None:
        self.project.brush.erase = checked

    def on_reset_clicked(self) -> None:
        self.project.slope_map.reset()
        self.canvas.render_raster()
        logger.info("Slope map reset.")

    def _on_painted(self) -> None:
        self.canvas.render_raster()
