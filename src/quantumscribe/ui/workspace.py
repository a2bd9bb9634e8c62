# Rev 0.1.0

# =========================
# File: src/quantumscribe/ui/workspace.py
# =========================
from __future__ import annotations
from typing import Optional, Dict
from PySide6.QtWidgets import QWidget, QStackedWidget, QVBoxLayout

from ..models.types import Route


class WorkspaceStack(QWidget):
    """Host the login and dashboard panels; show_route is the navigator's sink."""
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._stack = QStackedWidget(self)
        self._keys: Dict[Route, int] = {}
        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self._stack)

    def add_panel(self, route: Route, panel: QWidget) -> None:
        self._keys[route] = self._stack.addWidget(panel)

    def show_route(self, route: Route) -> None:
        idx = self._keys.get(route, -1)
        if idx >= 0:
            self._stack.setCurrentIndex(idx)

    def current_route(self) -> Optional[Route]:
        idx = self._stack.currentIndex()
        for route, i in self._keys.items():
            if i == idx:
                return route
        return None
