# Rev 0.1.0
# src/quantumscribe/ui/login_view.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QLineEdit, QPushButton, QLabel,
)

from ..models.errors import AuthError
from ..viewmodels.login_viewmodel import LoginViewModel
from .async_utils import spawn


class LoginView(QWidget):
    def __init__(self, vm: LoginViewModel, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._vm = vm

        title = QLabel("<h2>Login to QuantumScribe</h2>", self)
        title.setAlignment(Qt.AlignCenter)

        self._email = QLineEdit(self);     self._email.setPlaceholderText("Email")
        self._password = QLineEdit(self);  self._password.setPlaceholderText("Password")
        self._password.setEchoMode(QLineEdit.Password)
        self._email.textChanged.connect(lambda t: setattr(self._vm, "email", t))
        self._password.textChanged.connect(lambda t: setattr(self._vm, "password", t))
        self._password.returnPressed.connect(self._submit)

        self._btn = QPushButton("Login", self)
        self._btn.clicked.connect(self._submit)
        self._btn_register = QPushButton("Create account", self)
        self._btn_register.clicked.connect(self._register)
        self._btn_register.setVisible(vm.can_register)

        self._error = QLabel(self)
        self._error.setStyleSheet("color: #c0392b;")
        self._error.setVisible(False)

        form = QFormLayout()
        form.addRow("Email", self._email)
        form.addRow("Password", self._password)

        lay = QVBoxLayout(self)
        lay.addStretch(1)
        lay.addWidget(title)
        lay.addLayout(form)
        lay.addWidget(self._btn)
        lay.addWidget(self._btn_register)
        lay.addWidget(self._error)
        lay.addStretch(1)

        vm.busyChanged.connect(self._on_busy)
        vm.errorChanged.connect(self._on_error)

    def _submit(self) -> None:
        if not self._vm.busy:
            spawn(self._vm.submit())

    def _register(self) -> None:
        if not self._vm.busy:
            spawn(self._vm.register())

    def _on_busy(self, busy: bool) -> None:
        self._btn.setEnabled(not busy)
        self._btn_register.setEnabled(not busy)
        self._btn.setText("Loading..." if busy else "Login")

    def _on_error(self, error: Optional[AuthError]) -> None:
        self._error.setText(error.message if error else "")
        self._error.setVisible(error is not None)
