# Rev 0.1.0

# src/quantumscribe/main.py  (Rev 0.1.0)
import sys

from PySide6 import QtAsyncio
from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from .app_context import AppContext
from .models.types import GateState, Route
from .ui.main_window import MainWindow
from .utils.config import load_settings
from .utils.logging_setup import get_logger, setup_logging
from .utils.paths import ensure_dirs
from .viewmodels.session_gate import SessionGate

log = get_logger("main")


async def _start(win: MainWindow, ctx: AppContext, gate: SessionGate) -> None:
    await gate.mount()
    # first screen follows the passive session read; later changes come from auth events
    ctx.navigator.go_to(Route.DASHBOARD if gate.state == GateState.AUTHENTICATED else Route.LOGIN)
    win.show()


def main() -> int:
    app = QApplication(sys.argv)
    QCoreApplication.setOrganizationName("quantumscribe")
    QCoreApplication.setApplicationName("QuantumScribe")

    ensure_dirs()
    logfile = setup_logging()
    print(f"[logging] Writing to: {logfile}")

    settings = load_settings()
    ctx = AppContext.create(settings)
    gate = SessionGate(ctx.auth, ctx.navigator)

    win = MainWindow(ctx=ctx, gate=gate)
    app.setProperty("mainWindow", win)
    app.setFont(QFont("Sans Serif", 10))

    try:
        QtAsyncio.run(_start(win, ctx, gate), keep_running=True, quit_qapp=True)
    finally:
        gate.teardown()
        ctx.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
