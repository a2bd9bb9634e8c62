# Rev 0.1.0
# QuantumScribe — Main Window: navbar over a login/dashboard workspace

from __future__ import annotations
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from ..app_context import AppContext
from ..models.types import Route
from ..utils.logging_setup import get_logger
from ..viewmodels.login_viewmodel import LoginViewModel
from ..viewmodels.navbar_viewmodel import NavbarViewModel
from ..viewmodels.projects_viewmodel import ProjectsViewModel
from ..viewmodels.session_gate import SessionGate
from .async_utils import spawn
from .login_view import LoginView
from .navbar import NavbarWidget
from .projects_view import ProjectsView
from .workspace import WorkspaceStack

log = get_logger("MainWindow")


class MainWindow(QMainWindow):
    def __init__(self, *, ctx: AppContext, gate: SessionGate, parent=None):
        super().__init__(parent)
        self._ctx = ctx
        self._gate = gate

        self.setWindowTitle("QuantumScribe — Projects")
        win_cfg = ctx.settings.get("main_window", {})
        self.resize(int(win_cfg.get("width", 1100)), int(win_cfg.get("height", 720)))

        self._navbar_vm = NavbarViewModel(ctx.auth, gate)
        self._login_vm = LoginViewModel(ctx.auth, ctx.navigator)

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.addWidget(NavbarWidget(self._navbar_vm, ctx.navigator, central))

        self._workspace = WorkspaceStack(central)
        self._workspace.add_panel(Route.LOGIN, LoginView(self._login_vm, self._workspace))
        self._dashboard_host = QWidget(self._workspace)
        self._dashboard_layout = QVBoxLayout(self._dashboard_host)
        self._dashboard_layout.setContentsMargins(0, 0, 0, 0)
        self._workspace.add_panel(Route.DASHBOARD, self._dashboard_host)
        v.addWidget(self._workspace)
        self.setCentralWidget(central)

        self._projects_vm: Optional[ProjectsViewModel] = None
        self._projects_view: Optional[ProjectsView] = None

        ctx.navigator.routeChanged.connect(self._on_route)

    # -------------------- navigation --------------------

    def _on_route(self, route: Route) -> None:
        if route == Route.DASHBOARD:
            self._mount_dashboard()
        else:
            self._unmount_dashboard()
        self._workspace.show_route(route)

    def _mount_dashboard(self) -> None:
        # a fresh list view each visit, like a page load
        self._unmount_dashboard()
        self._projects_vm = ProjectsViewModel(self._ctx.projects_table)
        self._projects_view = ProjectsView(self._projects_vm, self._dashboard_host)
        self._dashboard_layout.addWidget(self._projects_view)
        spawn(self._projects_vm.initialize())

    def _unmount_dashboard(self) -> None:
        if self._projects_vm is not None:
            self._projects_vm.dispose()
            self._projects_vm = None
        if self._projects_view is not None:
            self._projects_view.setParent(None)
            self._projects_view.deleteLater()
            self._projects_view = None

    def closeEvent(self, event) -> None:
        self._unmount_dashboard()
        self._gate.teardown()
        log.info("Main window closed")
        super().closeEvent(event)
