"""Main application window hosting one randomcaser session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QByteArray, QEasingCurve, QEvent, QObject, QPropertyAnimation, Qt
from PySide6.QtGui import QAction, QActionGroup, QIcon
from PySide6.QtWidgets import (
    QGraphicsOpacityEffect, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QMainWindow,
    QMenu, QMessageBox, QPushButton, QVBoxLayout, QWidget,
)

from randomcaser.core.session import (
    CONTROL_COPY,
    CONTROL_INSERT,
    CONTROL_PURCHASE,
    CONTROL_RANDOMIZE,
    CONTROL_RESTORE,
    CONTROL_SEND,
    CONTROL_THEME,
    CONTROL_TIERS,
    PresentationStyle,
)
from randomcaser.core.randomizer import PLACEHOLDER_TEXT
from randomcaser.ui.themes import Theme, ThemeMenuEntry, build_stylesheet
from randomcaser.ui.widgets.transcript import TranscriptPanel

if TYPE_CHECKING:
    from randomcaser.billing.sandbox import SandboxBilling
    from randomcaser.config.settings import AppSettings
    from randomcaser.core.session import SessionController

_REVERT_FADE_MS = 250


class MainWindow(QMainWindow):
    """Input field, randomized output, action buttons and a local transcript."""

    def __init__(
        self,
        settings: AppSettings,
        controller: SessionController,
        billing: SandboxBilling | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._controller = controller
        self._billing = billing
        self._buttons: dict[str, QPushButton] = {}
        self._fades: dict[str, QPropertyAnimation] = {}
        self._activated = False

        self.setWindowTitle("rAnDoMcAsEr")
        self.setMinimumSize(360, 420)
        self.resize(420, 640)
        self.setObjectName("MainWindow")

        self._setup_layout()
        self._connect_controller()
        self._restore_state()

    @property
    def transcript(self) -> TranscriptPanel:
        return self._transcript

    def _setup_layout(self) -> None:
        self._view = QWidget()
        self._view.setObjectName("SessionView")
        layout = QVBoxLayout(self._view)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self._input = QLineEdit()
        self._input.setObjectName("InputField")
        self._input.setPlaceholderText("Type something...")
        self._input.installEventFilter(self)
        self._input.textChanged.connect(self._controller.input_changed)
        layout.addWidget(self._input)

        self._output = QLabel(PLACEHOLDER_TEXT)
        self._output.setObjectName("OutputLabel")
        self._output.setWordWrap(True)
        self._output.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._output.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self._output.setMinimumHeight(80)
        layout.addWidget(self._output)

        layout.addWidget(self._make_button(CONTROL_RANDOMIZE, self._controller.rerandomize))

        actions = QGridLayout()
        actions.setSpacing(8)
        actions.addWidget(self._make_button(CONTROL_SEND, self._controller.send), 0, 0)
        actions.addWidget(self._make_button(CONTROL_INSERT, self._controller.insert), 0, 1)
        actions.addWidget(self._make_button(CONTROL_COPY, self._controller.copy), 1, 0, 1, 2)
        layout.addLayout(actions)

        pro_row = QHBoxLayout()
        pro_row.setSpacing(8)
        pro_row.addWidget(self._make_button(CONTROL_PURCHASE, self._controller.request_purchase))
        pro_row.addWidget(self._make_button(CONTROL_RESTORE, self._controller.request_restore))
        theme_button = self._make_button(CONTROL_THEME, None)
        self._theme_menu = QMenu(theme_button)
        theme_button.setMenu(self._theme_menu)
        pro_row.addWidget(theme_button)
        layout.addLayout(pro_row)

        self._transcript = TranscriptPanel()
        self._transcript.setVisible(False)
        layout.addWidget(self._transcript, 1)

        self.setCentralWidget(self._view)

    def _make_button(self, control_id: str, handler) -> QPushButton:
        button = QPushButton(self._controller.labels[control_id])
        button.setObjectName(f"{control_id.title()}Button")
        button.setProperty("tier", CONTROL_TIERS[control_id].value)
        if handler is not None:
            button.clicked.connect(lambda _checked=False: handler())
        self._buttons[control_id] = button
        return button

    def _connect_controller(self) -> None:
        c = self._controller
        c.output_changed.connect(self._output.setText)
        c.label_changed.connect(self._on_label_changed)
        c.no_content.connect(self._show_no_content)
        c.sink_failed.connect(self._on_sink_failed)
        c.purchase_failed.connect(self._on_purchase_failed)
        c.stylesheet_theme_changed.connect(self._apply_theme)
        c.theme_menu_changed.connect(self._rebuild_theme_menu)
        c.affordances_changed.connect(self._apply_affordances)
        c.entitlement_changed.connect(self._on_entitlement_changed)
        c.presentation_requested.connect(self._apply_presentation)
        self._transcript.message_sent.connect(self._on_message_sent)

    # -- controller slots --

    def _on_label_changed(self, control_id: str, text: str, animated: bool) -> None:
        button = self._buttons.get(control_id)
        if button is None:
            return
        button.setText(text)
        if animated:
            self._fade_in(control_id, button)

    def _fade_in(self, control_id: str, button: QPushButton) -> None:
        effect = QGraphicsOpacityEffect(button)
        button.setGraphicsEffect(effect)
        animation = QPropertyAnimation(effect, QByteArray(b"opacity"), self)
        animation.setDuration(_REVERT_FADE_MS)
        animation.setStartValue(0.2)
        animation.setEndValue(1.0)
        animation.setEasingCurve(QEasingCurve.Type.OutCubic)
        animation.finished.connect(lambda: button.setGraphicsEffect(None))
        previous = self._fades.pop(control_id, None)
        if previous is not None:
            previous.stop()
        self._fades[control_id] = animation
        animation.start()

    def _show_no_content(self, title: str, message: str) -> None:
        QMessageBox.information(self, title, message)

    def _on_message_sent(self, text: str) -> None:
        self.statusBar().showMessage(f"Sent {len(text)} characters", 3000)

    def _on_sink_failed(self, control_id: str, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def _on_purchase_failed(self, reason: str) -> None:
        QMessageBox.warning(self, "Purchase Failed", reason)

    def _on_entitlement_changed(self, unlocked: bool) -> None:
        if unlocked:
            self.statusBar().showMessage("PRO unlocked. Thanks for your support!", 5000)

    def _apply_theme(self, theme: Theme) -> None:
        self._view.setStyleSheet(build_stylesheet(theme))
        for button in self._buttons.values():
            button.style().unpolish(button)
            button.style().polish(button)

    def _rebuild_theme_menu(self, entries: list[ThemeMenuEntry]) -> None:
        self._theme_menu.clear()
        group = QActionGroup(self._theme_menu)
        group.setExclusive(True)
        for entry in entries:
            action = QAction(entry.name, self._theme_menu)
            action.setCheckable(True)
            action.setChecked(entry.checked)
            action.setData(entry.theme_id)
            if entry.icon_name:
                action.setIcon(QIcon.fromTheme(entry.icon_name))
            action.triggered.connect(
                lambda _checked=False, theme_id=entry.theme_id: self._controller.select_theme(theme_id)
            )
            group.addAction(action)
            self._theme_menu.addAction(action)

    def _apply_affordances(self, visible: dict[str, bool]) -> None:
        for control_id, shown in visible.items():
            button = self._buttons.get(control_id)
            if button is not None:
                button.setVisible(shown)

    def _apply_presentation(self, style: PresentationStyle) -> None:
        expanded = style is PresentationStyle.EXPANDED
        self._transcript.setVisible(expanded)
        if expanded:
            self._input.setFocus()
        self._controller.presentation_changed(style)

    # -- Qt events --

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self._input and event.type() == QEvent.Type.FocusIn:
            self._controller.begin_editing()
        return super().eventFilter(watched, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if self._activated:
            return
        self._activated = True
        self._controller.activate(self._transcript)
        self._input.blockSignals(True)
        self._input.setText(self._controller.input_text)
        self._input.blockSignals(False)

    def _restore_state(self) -> None:
        geo = self._settings.window_geometry
        if geo:
            self.restoreGeometry(QByteArray.fromBase64(geo.encode("ascii")))

    def closeEvent(self, event) -> None:
        self._controller.deactivate()
        if self._billing is not None:
            self._billing.shutdown()
        self._settings.window_geometry = bytes(self.saveGeometry().toBase64()).decode("ascii")
        super().closeEvent(event)
