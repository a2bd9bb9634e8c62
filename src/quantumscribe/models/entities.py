# Rev 0.1.0
"""Lightweight entities shared by repositories and viewmodels"""
from __future__ import annotations
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Project:
    id: str                    # assigned by the store, never client-side
    name: str
    created_at: str            # ISO-8601, assigned by the store
    description: str = ""

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Project":
        pid = row.get("id")
        if pid is None or str(pid) == "":
            raise ValueError(f"project row without id: {row!r}")
        return cls(
            id=str(pid),
            name=row.get("name") or "",
            description=row.get("description") or "",
            created_at=str(row.get("created_at") or ""),
        )


@dataclass
class PendingForm:
    name: str = ""
    description: str = ""

    def fields(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}

    def is_empty(self) -> bool:
        return not self.name and not self.description


@dataclass(frozen=True)
class Session:
    access_token: str
    user_id: str
    email: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[float] = None     # epoch seconds

    def is_expired(self, now: Optional[float] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now if now is not None else time.time()) >= self.expires_at

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            access_token=data["access_token"],
            user_id=str(data["user_id"]),
            email=data.get("email"),
            refresh_token=data.get("refresh_token"),
            expires_at=data.get("expires_at"),
        )
