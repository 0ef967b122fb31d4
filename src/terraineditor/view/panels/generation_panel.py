"""
River Generation Control Panel
"""
import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QDoubleSpinBox, QFormLayout, QGroupBox, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
)

from terraineditor.model.state import ProjectState

logger = logging.getLogger(__name__)


class GenerationControlPanel(QWidget):
    # Emitted when the user asks for a new river
    regenerate_requested = Signal()
    # Emitted when the user toggles the preview rotation
    toggle_render_requested = Signal()

    def __init__(self, project_state: ProjectState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.project = project_state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Weights Group ---
        grp = QGroupBox("Generation Weights")
        form = QFormLayout(grp)

        weights = self.project.weights
        self.growth_spin = self._make_weight_spin(weights.growth)
        self.growth_spin.valueChanged.connect(self.on_growth_changed)
        form.addRow("Growth:", self.growth_spin)

        self.symmetric_spin = self._make_weight_spin(weights.symmetric)
        self.symmetric_spin.valueChanged.connect(self.on_symmetric_changed)
        form.addRow("Symmetric branching:", self.symmetric_spin)

        self.asymmetric_spin = self._make_weight_spin(weights.asymmetric)
        self.asymmetric_spin.valueChanged.connect(self.on_asymmetric_changed)
        form.addRow("Asymmetric branching:", self.asymmetric_spin)

        layout.addWidget(grp)

        # --- Actions ---
        btn_row = QHBoxLayout()
        self.btn_generate = QPushButton("Regenerate")
        self.btn_generate.setMinimumHeight(40)
        self.btn_generate.clicked.connect(self.regenerate_requested)
        btn_row.addWidget(self.btn_generate)

        self.btn_render = QPushButton("Start")
        self.btn_render.setMinimumHeight(40)
        self.btn_render.clicked.connect(self.toggle_render_requested)
        btn_row.addWidget(self.btn_render)
        layout.addLayout(btn_row)

        # --- Stats ---
        self.lbl_stats = QLabel("")
        self.lbl_stats.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.lbl_stats.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.lbl_stats.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.lbl_stats)

        layout.addStretch()

    # --- PROPERTIES ---

    @property
    def stats_text(self) -> str:
        return self.lbl_stats.text()

    def set_stats(self, text: str, is_error: bool = False) -> None:
        self.lbl_stats.setText(text)
        self.lbl_stats.setStyleSheet("color: red;" if is_error else "")

    def set_running(self, running: bool) -> None:
        self.btn_render.setText("Stop" if running else "Start")

    # --- SLOTS ---

    def on_growth_changed(self, value: float) -> None:
        self.project.weights.growth = value

    def on_symmetric_changed(self, value: float) -> None:
        self.project.weights.symmetric = value

    def on_asymmetric_changed(self, value: float) -> None:
        self.project.weights.asymmetric = value

    @staticmethod
    def _make_weight_spin(value: float) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setDecimals(2)
        spin.setRange(0.0, 10.0)
        spin.setSingleStep(0.05)
        spin.setValue(value)
        return spin
