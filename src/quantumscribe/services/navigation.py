# Rev 0.1.0
# src/quantumscribe/services/navigation.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..models.types import Route
from ..utils.logging_setup import get_logger

log = get_logger("Navigator")


class Navigator(QObject):
    """
    Route holder. go_to() on the current route is a no-op, so the login form's
    direct redirect and the SIGNED_IN redirect collapse into one change.
    Emits:
      routeChanged(Route)
    """
    routeChanged = Signal(object)

    def __init__(self, initial: Optional[Route] = None):
        super().__init__()
        self._current = initial

    @property
    def current_route(self) -> Optional[Route]:
        return self._current

    def go_to(self, route: Route) -> bool:
        route = Route(route)
        if route == self._current:
            log.debug("Already on %s", route.value)
            return False
        log.info("Navigate %s -> %s", self._current.value if self._current else None, route.value)
        self._current = route
        self.routeChanged.emit(route)
        return True
