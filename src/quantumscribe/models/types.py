# QuantumScribe type definitions
# Rev 0.1.0

from __future__ import annotations
from enum import Enum


class Route(str, Enum):
    DASHBOARD = "dashboard"    # protected home
    LOGIN = "login"            # public


class GateState(Enum):
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


# Auth event kinds as the identity provider names them
SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"
TOKEN_REFRESHED = "TOKEN_REFRESHED"
USER_UPDATED = "USER_UPDATED"
