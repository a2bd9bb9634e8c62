# Rev 0.1.0
# src/quantumscribe/ui/navbar.py
from __future__ import annotations
from typing import Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton

from ..models.types import Route
from ..services.navigation import Navigator
from ..viewmodels.navbar_viewmodel import NavbarViewModel
from .async_utils import spawn


class NavbarWidget(QWidget):
    def __init__(self, vm: NavbarViewModel, navigator: Navigator, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._navigator = navigator

        self._title = QLabel("<b>QuantumScribe</b>", self)
        self._user = QLabel(self)
        self._btn_dashboard = QPushButton("Dashboard", self)
        self._btn_dashboard.clicked.connect(lambda: navigator.go_to(Route.DASHBOARD))
        self._btn_sign_out = QPushButton("Sign Out", self)
        self._btn_sign_out.clicked.connect(lambda: spawn(vm.sign_out()))
        self._btn_log_in = QPushButton("Log In", self)
        self._btn_log_in.clicked.connect(lambda: navigator.go_to(Route.LOGIN))

        lay = QHBoxLayout(self)
        lay.addWidget(self._title)
        lay.addStretch(1)
        lay.addWidget(self._user)
        lay.addWidget(self._btn_dashboard)
        lay.addWidget(self._btn_sign_out)
        lay.addWidget(self._btn_log_in)

        vm.changed.connect(self._refresh)
        self._refresh(vm.signed_in)

    def _refresh(self, signed_in: bool) -> None:
        self._user.setText(self._vm.email or "")
        self._btn_dashboard.setVisible(signed_in)
        self._btn_sign_out.setVisible(signed_in)
        self._btn_log_in.setVisible(not signed_in)
