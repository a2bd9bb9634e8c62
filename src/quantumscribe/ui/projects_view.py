# Rev 0.1.0
# QuantumScribe — Dashboard: create form + project table
# Columns: Name | Description | Created

from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox, QLineEdit, QTextEdit,
    QPushButton, QLabel, QTableWidget, QTableWidgetItem, QHeaderView,
)

from ..models.entities import PendingForm, Project
from ..viewmodels.projects_viewmodel import ProjectsViewModel
from .async_utils import spawn


class ProjectsView(QWidget):
    def __init__(self, vm: ProjectsViewModel, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._vm = vm

        # ---- create form ----
        box = QGroupBox("Create New Project", self)
        self._name = QLineEdit(box);  self._name.setPlaceholderText("Enter project name")
        self._desc = QTextEdit(box);  self._desc.setPlaceholderText("Enter project description")
        self._desc.setAcceptRichText(False)
        self._desc.setFixedHeight(72)
        self._name.textEdited.connect(vm.set_pending_name)
        self._desc.textChanged.connect(lambda: vm.set_pending_description(self._desc.toPlainText()))
        self._name.textChanged.connect(self._sync_create_enabled)

        self._btn_create = QPushButton("Create Project", box)
        self._btn_create.clicked.connect(self._create)
        self._btn_refresh = QPushButton("Refresh", self)
        self._btn_refresh.clicked.connect(lambda: spawn(vm.fetch_all()))

        form = QFormLayout(box)
        form.addRow("Project Name", self._name)
        form.addRow("Project Description", self._desc)
        form.addRow(self._btn_create)

        self._error = QLabel(self)
        self._error.setStyleSheet("color: #c0392b;")
        self._error.setVisible(False)

        self._empty = QLabel("No projects found. Create your first project above!", self)

        # Name | Description | Created
        self._tbl = QTableWidget(0, 3, self)
        self._tbl.setHorizontalHeaderLabels(["Name", "Description", "Created"])
        self._tbl.setSelectionBehavior(QTableWidget.SelectRows)
        self._tbl.setEditTriggers(QTableWidget.NoEditTriggers)
        self._tbl.verticalHeader().setVisible(False)
        h = self._tbl.horizontalHeader()
        h.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        h.setSectionResizeMode(1, QHeaderView.Stretch)
        h.setSectionResizeMode(2, QHeaderView.ResizeToContents)

        top = QHBoxLayout()
        top.addWidget(QLabel("<h3>Your Projects</h3>", self))
        top.addStretch(1)
        top.addWidget(self._btn_refresh)

        lay = QVBoxLayout(self)
        lay.addWidget(box)
        lay.addWidget(self._error)
        lay.addLayout(top)
        lay.addWidget(self._empty)
        lay.addWidget(self._tbl)

        vm.recordsChanged.connect(self._render)
        vm.pendingChanged.connect(self._on_pending)
        vm.busyChanged.connect(self._on_busy)
        vm.errorChanged.connect(self._on_error)
        self._render(vm.records)
        self._sync_create_enabled()

    # ---- slots
    def _create(self) -> None:
        if self._vm.pending.name.strip() and not self._vm.busy:
            spawn(self._vm.create_one())

    def _render(self, records: List[Project]) -> None:
        self._tbl.setRowCount(0)
        for rec in records:
            row = self._tbl.rowCount()
            self._tbl.insertRow(row)
            item_name = QTableWidgetItem(rec.name)
            item_name.setData(Qt.UserRole, rec.id)
            self._tbl.setItem(row, 0, item_name)
            self._tbl.setItem(row, 1, QTableWidgetItem(rec.description))
            self._tbl.setItem(row, 2, QTableWidgetItem(_fmt_date(rec.created_at)))
        self._empty.setVisible(not records)
        self._tbl.setVisible(bool(records))

    def _on_pending(self, pending: PendingForm) -> None:
        # only a reset needs pushing back into the widgets
        if pending.is_empty():
            self._name.clear()
            self._desc.clear()

    def _on_busy(self, busy: bool) -> None:
        self._btn_create.setText("Creating..." if busy else "Create Project")
        self._btn_refresh.setEnabled(not busy)
        self._sync_create_enabled()

    def _on_error(self, error) -> None:
        self._error.setText(error.message if error else "")
        self._error.setVisible(error is not None)

    def _sync_create_enabled(self) -> None:
        self._btn_create.setEnabled(bool(self._name.text().strip()) and not self._vm.busy)


def _fmt_date(raw: str) -> str:
    if not raw:
        return ""
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).astimezone().strftime("%Y-%m-%d")
    except ValueError:
        return raw
