# Rev 0.1.0
# src/quantumscribe/viewmodels/login_viewmodel.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..models.errors import AuthError, AuthFailure
from ..models.types import Route
from ..services.auth_session import AuthSession
from ..services.navigation import Navigator
from ..utils.logging_setup import get_logger

log = get_logger("LoginViewModel")


class LoginViewModel(QObject):
    """
    Emits:
      busyChanged(bool)
      errorChanged(AuthError | None)
    """
    busyChanged = Signal(bool)
    errorChanged = Signal(object)

    def __init__(self, auth: AuthSession, navigator: Navigator):
        super().__init__()
        self._auth = auth
        self._navigator = navigator
        self.email = ""
        self.password = ""
        self._busy = False
        self._error: Optional[AuthError] = None

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def error(self) -> Optional[AuthError]:
        return self._error

    @property
    def can_register(self) -> bool:
        return self._auth.supports_registration

    async def submit(self) -> bool:
        """Sign in with the form's credentials; the fields are kept on failure."""
        return await self._run(register=False)

    async def register(self) -> bool:
        """Create an account with the form's credentials, then sign in with it."""
        if not self.can_register:
            self._set_error(AuthError("Sign-up is not available for this backend"))
            return False
        return await self._run(register=True)

    # ---- internals
    async def _run(self, *, register: bool) -> bool:
        if not self.email.strip() or not self.password:
            self._set_error(AuthError("Email and password are required"))
            return False

        email = self.email.strip()
        self._set_busy(True)
        self._set_error(None)
        try:
            if register:
                await self._auth.register(email, self.password)
            await self._auth.sign_in(email, self.password)
        except AuthFailure as exc:
            log.warning("%s failed for %s: %s", "Sign-up" if register else "Sign-in", email, exc.message)
            self._set_error(AuthError(exc.message))
            return False
        finally:
            self._set_busy(False)

        self._navigator.go_to(Route.DASHBOARD)
        return True

    def _set_busy(self, busy: bool) -> None:
        if busy != self._busy:
            self._busy = busy
            self.busyChanged.emit(busy)

    def _set_error(self, error: Optional[AuthError]) -> None:
        if error != self._error:
            self._error = error
            self.errorChanged.emit(error)
