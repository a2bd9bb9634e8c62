# Rev 0.1.0
"""Auth session base (Rev 0.1.0)
Holds the current Session and fans out auth-state events over a Qt signal.
Concrete providers: RestAuthSession (hosted), LocalAuthSession (offline sqlite).
"""
from __future__ import annotations
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Session
from ..utils.logging_setup import get_logger

log = get_logger("AuthSession")

AuthHandler = Callable[[str, Optional[Session]], None]


class Subscription:
    def __init__(self, signal, handler: AuthHandler):
        self._signal = signal
        self._handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._signal.disconnect(self._handler)


class AuthSession(QObject):
    """
    Emits:
      authStateChanged(event: str, session: Session | None)
    Subclasses implement sign_in / sign_out and call _set_session().
    """
    authStateChanged = Signal(str, object)

    def __init__(self):
        super().__init__()
        self._session: Optional[Session] = None

    # ---- subscription
    def subscribe(self, handler: AuthHandler) -> Subscription:
        self.authStateChanged.connect(handler)
        return Subscription(self.authStateChanged, handler)

    # ---- queries
    async def get_current_session(self) -> Optional[Session]:
        if self._session is not None and self._session.is_expired():
            log.info("Session for %s expired", self._session.email)
            self._session = None
        return self._session

    def access_token(self) -> Optional[str]:
        return self._session.access_token if self._session else None

    @property
    def supports_registration(self) -> bool:
        return False

    # ---- commands
    async def sign_in(self, email: str, password: str) -> Session:
        raise NotImplementedError

    async def sign_out(self) -> None:
        raise NotImplementedError

    async def register(self, email: str, password: str) -> str:
        raise NotImplementedError

    # ---- internals
    def _set_session(self, session: Optional[Session], event: str) -> None:
        self._session = session
        log.info("Auth event %s (user=%s)", event, session.email if session else None)
        self.authStateChanged.emit(event, session)
