# Rev 0.1.0
"""Error kinds stored on viewmodels, and the exceptions adapters raise."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


# ---- adapter exceptions (raised by repositories / auth sessions)

class RemoteError(Exception):
    """A call to the backing store failed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class AuthFailure(RemoteError):
    """The identity provider rejected a request; message is shown to the user as-is."""


# ---- error kinds (viewmodel state, surfaced for display)

@dataclass(frozen=True)
class FetchFailed:
    message: str = "Failed to fetch projects"


@dataclass(frozen=True)
class CreateFailed:
    message: str = "Failed to create project"


@dataclass(frozen=True)
class AuthError:
    message: str
