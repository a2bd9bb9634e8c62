# Rev 0.1.0
# src/quantumscribe/viewmodels/navbar_viewmodel.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Session
from ..services.auth_session import AuthSession
from .session_gate import SessionGate


class NavbarViewModel(QObject):
    """
    Mirrors the gate's session snapshot for the top bar ("Sign Out" vs "Log In").
    Emits:
      changed(bool signed_in)
    """
    changed = Signal(bool)

    def __init__(self, auth: AuthSession, gate: SessionGate):
        super().__init__()
        self._auth = auth
        self._session: Optional[Session] = gate.current_session
        gate.sessionChanged.connect(self._on_session_changed)

    @property
    def signed_in(self) -> bool:
        return self._session is not None

    @property
    def email(self) -> Optional[str]:
        return self._session.email if self._session else None

    async def sign_out(self) -> None:
        # navigation follows from the SIGNED_OUT event the gate receives
        await self._auth.sign_out()

    def _on_session_changed(self, session: Optional[Session]) -> None:
        self._session = session
        self.changed.emit(self.signed_in)
