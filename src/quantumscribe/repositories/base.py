# Rev 0.1.0
# src/quantumscribe/repositories/base.py
from __future__ import annotations
from typing import Dict, List, Protocol

from ..models.entities import Project


class RemoteTable(Protocol):
    """
    A persisted collection of projects. Implementations must:
      select_all(order_by, descending) -> list[Project]
      insert_one({"name", "description"}) -> Project   (store assigns id + created_at)
    and raise RemoteError on failure.
    """

    async def select_all(self, order_by: str = "created_at", descending: bool = True) -> List[Project]:
        ...

    async def insert_one(self, fields: Dict[str, str]) -> Project:
        ...
