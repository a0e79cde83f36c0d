"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtWidgets import QApplication

from randomcaser import __version__
from randomcaser.billing import BillingBridge, SandboxBilling
from randomcaser.config.settings import AppSettings
from randomcaser.core.entitlement import EntitlementState
from randomcaser.core.session import SessionController
from randomcaser.ui.clipboard import QtClipboardSink
from randomcaser.ui.feedback import FeedbackScheduler
from randomcaser.ui.main_window import MainWindow
from randomcaser.ui.themes import ThemeStore


def configure_logging(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("randomcaser")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "randomcaser.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_session(
    settings: AppSettings,
    *,
    billing_latency_s: float = 0.6,
) -> tuple[SessionController, SandboxBilling]:
    """Wire the session controller to its collaborators."""
    themes = ThemeStore(settings)
    entitlement = EntitlementState(settings)
    feedback = FeedbackScheduler()
    bridge = BillingBridge()
    billing = SandboxBilling(settings, bridge, latency_s=billing_latency_s)
    controller = SessionController(
        settings,
        themes,
        entitlement,
        feedback,
        QtClipboardSink(),
        billing=billing,
        bridge=bridge,
    )
    # Parent the helpers so they share the controller's lifetime and thread.
    feedback.setParent(controller)
    bridge.setParent(controller)
    billing.setParent(controller)
    entitlement.setParent(controller)
    return controller, billing


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("RandomCaser")
    app.setOrganizationName("RandomCaser")
    settings = AppSettings()
    logger = configure_logging(settings)
    logger.info("startup version=%s", __version__)

    controller, billing = build_session(settings)
    window = MainWindow(settings, controller, billing)
    window.show()

    exit_code = app.exec()
    logger.info("shutdown exit_code=%s", exit_code)
    return exit_code
