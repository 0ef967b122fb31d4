"""
Global Pointer Release
Reports every mouse button release in the application, wherever it happens.
"""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Signal


class GlobalReleaseFilter(QObject):
    """
    Application-wide event filter. Install it on the QApplication so a stroke
    or drag that ends outside its canvas still ends.
    """
    released = Signal()

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseButtonRelease:
            self.released.emit()
        # Never consume the event
        return False

    def uninstall(self) -> None:
        app = QCoreApplication.instance()
        if app is not None:
            app.removeEventFilter(self)


def install_global_release(
    *handlers: Callable[[], None], parent: Optional[QObject] = None
) -> GlobalReleaseFilter:
    """
    Call every handler on any mouse release in the running application.

    The handlers must tolerate being called when nothing is in progress, since
    every release in every window reaches them.
    """
    release_filter = GlobalReleaseFilter(parent)
    for handler in handlers:
        release_filter.released.connect(handler)
    app = QCoreApplication.instance()
    if app is not None:
        app.installEventFilter(release_filter)
    return release_filter
