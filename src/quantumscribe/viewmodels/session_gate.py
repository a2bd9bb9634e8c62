# Rev 0.1.0
"""Session gate (Rev 0.1.0)
Follows auth-state events for the lifetime of the main window and routes
to the dashboard on sign-in, to the login view on sign-out.
"""
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Session
from ..models.types import (
    GateState, Route, SIGNED_IN, SIGNED_OUT, TOKEN_REFRESHED, USER_UPDATED,
)
from ..services.auth_session import AuthSession, Subscription
from ..services.navigation import Navigator
from ..utils.logging_setup import get_logger

log = get_logger("SessionGate")


class SessionGate(QObject):
    """
    Emits:
      stateChanged(GateState)
      sessionChanged(Session | None)
    """
    stateChanged = Signal(object)
    sessionChanged = Signal(object)

    def __init__(self, auth: AuthSession, navigator: Navigator):
        super().__init__()
        self._auth = auth
        self._navigator = navigator
        self._state = GateState.UNKNOWN
        self._session: Optional[Session] = None
        self._subscription: Optional[Subscription] = None
        self._mounted = False
        self._torn_down = False
        self._events_seen = 0

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def current_session(self) -> Optional[Session]:
        return self._session

    async def mount(self) -> None:
        if self._mounted:
            raise RuntimeError("SessionGate is already mounted")
        self._mounted = True
        self._subscription = self._auth.subscribe(self._on_auth_event)

        seen_before = self._events_seen
        session = await self._auth.get_current_session()
        if self._torn_down or self._events_seen != seen_before:
            # a sign-in or sign-out arrived while reading; it is newer than this snapshot
            return
        self._transition(GateState.AUTHENTICATED if session else GateState.UNAUTHENTICATED, session)

    def teardown(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        log.debug("SessionGate torn down")

    # ---- internals
    def _on_auth_event(self, event: str, session: Optional[Session]) -> None:
        if self._torn_down:
            return
        if event == SIGNED_IN:
            self._events_seen += 1
            self._transition(GateState.AUTHENTICATED, session)
            self._navigator.go_to(Route.DASHBOARD)
        elif event == SIGNED_OUT:
            self._events_seen += 1
            self._transition(GateState.UNAUTHENTICATED, None)
            self._navigator.go_to(Route.LOGIN)
        elif event in (TOKEN_REFRESHED, USER_UPDATED) and session is not None:
            self._set_session(session)
        else:
            log.debug("Ignoring auth event %s", event)

    def _set_session(self, session: Optional[Session]) -> None:
        if session == self._session:
            return
        self._session = session
        self.sessionChanged.emit(session)

    def _transition(self, state: GateState, session: Optional[Session]) -> None:
        self._set_session(session)
        if state == self._state:
            return
        log.info("Session state %s -> %s", self._state.value, state.value)
        self._state = state
        self.stateChanged.emit(state)
