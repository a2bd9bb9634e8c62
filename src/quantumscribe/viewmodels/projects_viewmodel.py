# Rev 0.1.0
# src/quantumscribe/viewmodels/projects_viewmodel.py
from __future__ import annotations
from typing import List, Optional, Union

from PySide6.QtCore import QObject, Signal

from ..models.entities import PendingForm, Project
from ..models.errors import CreateFailed, FetchFailed, RemoteError
from ..repositories.base import RemoteTable
from ..utils.logging_setup import get_logger

log = get_logger("ProjectsViewModel")

ListError = Union[FetchFailed, CreateFailed]


class ProjectsViewModel(QObject):
    """
    Owns the project list shown on the dashboard.

    records are newest-first after a fetch; a project created in this session
    is appended at the end and only moves into place on the next fetch.

    Emits:
      recordsChanged(list[Project])
      pendingChanged(PendingForm)
      busyChanged(bool)
      errorChanged(FetchFailed | CreateFailed | None)
    """
    recordsChanged = Signal(object)
    pendingChanged = Signal(object)
    busyChanged = Signal(bool)
    errorChanged = Signal(object)

    def __init__(self, table: RemoteTable):
        super().__init__()
        self._table = table
        self._records: List[Project] = []
        self._pending = PendingForm()
        self._in_flight = 0
        self._last_error: Optional[ListError] = None
        self._initialized = False
        self._fetch_generation = 0
        self._disposed = False

    @classmethod
    async def create(cls, table: RemoteTable) -> "ProjectsViewModel":
        vm = cls(table)
        await vm.initialize()
        return vm

    # ---- state
    @property
    def records(self) -> List[Project]:
        return list(self._records)

    @property
    def pending(self) -> PendingForm:
        return self._pending

    @property
    def busy(self) -> bool:
        return self._in_flight > 0

    @property
    def last_error(self) -> Optional[ListError]:
        return self._last_error

    # ---- form bindings
    def set_pending_name(self, name: str) -> None:
        self._pending = PendingForm(name=name, description=self._pending.description)
        self.pendingChanged.emit(self._pending)

    def set_pending_description(self, description: str) -> None:
        self._pending = PendingForm(name=self._pending.name, description=description)
        self.pendingChanged.emit(self._pending)

    # ---- commands
    async def initialize(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        await self.fetch_all()

    async def fetch_all(self) -> None:
        self._fetch_generation += 1
        generation = self._fetch_generation
        self._begin()
        try:
            rows = await self._table.select_all(order_by="created_at", descending=True)
        except RemoteError as exc:
            if self._is_current(generation):
                log.error("Error fetching projects: %s", exc.message)
                self._set_error(FetchFailed())
            return
        finally:
            self._end()

        if not self._is_current(generation):
            log.debug("Dropping stale fetch #%d (latest #%d)", generation, self._fetch_generation)
            return
        self._records = list(rows)
        self.recordsChanged.emit(self.records)
        self._set_error(None)
        log.info("Loaded %d projects", len(self._records))

    async def create_one(self, form: Optional[PendingForm] = None) -> Optional[Project]:
        form = form if form is not None else self._pending
        if not form.name.strip():
            raise ValueError("name required")

        self._set_error(None)
        self._begin()
        try:
            project = await self._table.insert_one(form.fields())
        except RemoteError as exc:
            if not self._disposed:
                log.error("Error creating project: %s", exc.message)
                self._set_error(CreateFailed())
            return None
        finally:
            self._end()

        if self._disposed:
            return project
        self._records.append(project)
        self.recordsChanged.emit(self.records)
        self._pending = PendingForm()
        self.pendingChanged.emit(self._pending)
        log.info("Created project %s (%s)", project.id, project.name)
        return project

    def dispose(self) -> None:
        """Stop applying results; in-flight calls finish but are ignored."""
        self._disposed = True

    # ---- internals
    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._fetch_generation

    def _begin(self) -> None:
        self._in_flight += 1
        if self._in_flight == 1 and not self._disposed:
            self.busyChanged.emit(True)

    def _end(self) -> None:
        self._in_flight -= 1
        if self._in_flight == 0 and not self._disposed:
            self.busyChanged.emit(False)

    def _set_error(self, error: Optional[ListError]) -> None:
        if error == self._last_error:
            return
        self._last_error = error
        self.errorChanged.emit(error)
