"""
Contour Panel
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGroupBox, QLabel, QVBoxLayout, QWidget

from terraineditor.model.state import ProjectState
from terraineditor.view.widgets.contour_canvas import ContourCanvas


class ContourPanel(QWidget):
    def __init__(self, project_state: ProjectState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.project = project_state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Contour")
        grp_layout = QVBoxLayout(grp)

        self.canvas = ContourCanvas(self.project.contour)
        grp_layout.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignHCenter)

        hint = QLabel("Drag a vertex marker to move it.")
        hint.setStyleSheet("color: gray;")
        grp_layout.addWidget(hint)

        layout.addWidget(grp)
