"""Session orchestration: input, output, button feedback, theme and PRO gating."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

from PySide6.QtCore import QObject, Signal

from randomcaser.billing.bridge import BillingBridge
from randomcaser.config.settings import DRAFT_TEXT_KEY, AppSettings
from randomcaser.core.entitlement import (
    PRO_PRODUCT_ID,
    EntitlementState,
    TransactionEvent,
    TransactionOutcome,
)
from randomcaser.core.randomizer import PLACEHOLDER_TEXT, randomize
from randomcaser.core.sinks import ClipboardSink, ConversationSink
from randomcaser.errors import (
    ERROR_MESSAGES,
    NO_CONTENT_TITLE,
    ErrorCode,
    RandomCaserError,
    SinkOutcome,
)
from randomcaser.ui.feedback import FeedbackScheduler
from randomcaser.ui.themes import ButtonStyle, ButtonTier, ThemeMenuEntry, ThemeStore, style_for

logger = logging.getLogger("randomcaser.session")

CONTROL_RANDOMIZE = "randomize"
CONTROL_SEND = "send"
CONTROL_INSERT = "insert"
CONTROL_COPY = "copy"
CONTROL_PURCHASE = "purchase"
CONTROL_RESTORE = "restore"
CONTROL_THEME = "theme"

ACTION_CONTROLS: tuple[str, ...] = (CONTROL_SEND, CONTROL_INSERT, CONTROL_COPY)

RESTING_CAPTIONS: dict[str, str] = {
    CONTROL_RANDOMIZE: "Re-Randomize",
    CONTROL_SEND: "Send Message",
    CONTROL_INSERT: "Add to Message Box",
    CONTROL_COPY: "Copy to Clipboard",
    CONTROL_PURCHASE: "Go PRO",
    CONTROL_RESTORE: "Restore Purchase",
    CONTROL_THEME: "Theme",
}

FLASH_LABELS: dict[str, str] = {
    CONTROL_SEND: "Sent!",
    CONTROL_INSERT: "Added!",
    CONTROL_COPY: "Copied!",
}
FAILURE_LABEL = "Error"

CONTROL_TIERS: dict[str, ButtonTier] = {
    CONTROL_RANDOMIZE: ButtonTier.PRIMARY,
    CONTROL_SEND: ButtonTier.SECONDARY,
    CONTROL_INSERT: ButtonTier.SECONDARY,
    CONTROL_COPY: ButtonTier.SECONDARY,
    CONTROL_PURCHASE: ButtonTier.ACTION,
    CONTROL_RESTORE: ButtonTier.ACTION,
    CONTROL_THEME: ButtonTier.ACTION,
}

PROMO_SUFFIX = "\n\nsent with rAnDoMcAsEr"


class SessionState(Enum):
    IDLE = "idle"
    RANDOMIZED = "randomized"


class PresentationStyle(Enum):
    COMPACT = "compact"
    EXPANDED = "expanded"


class BillingClient(Protocol):
    def request_purchase(self, product_id: str = PRO_PRODUCT_ID) -> None: ...

    def request_restore(self, product_id: str = PRO_PRODUCT_ID) -> None: ...


class SessionController(QObject):
    """Drives one randomcaser session on the UI thread.

    All mutations happen on the thread that owns the controller. Billing
    outcomes reach it only through ``BillingBridge.transaction``.
    """

    output_changed = Signal(str)
    label_changed = Signal(str, str, bool)  # control_id, text, animated
    no_content = Signal(str, str)  # title, message
    sink_failed = Signal(str, str)  # control_id, message
    styles_changed = Signal(object)  # dict[str, ButtonStyle]
    stylesheet_theme_changed = Signal(object)  # Theme
    theme_menu_changed = Signal(list)  # list[ThemeMenuEntry]
    entitlement_changed = Signal(bool)
    affordances_changed = Signal(object)  # dict[str, bool]
    purchase_failed = Signal(str)
    presentation_requested = Signal(object)  # PresentationStyle
    conversation_available_changed = Signal(bool)

    def __init__(
        self,
        settings: AppSettings,
        themes: ThemeStore,
        entitlement: EntitlementState,
        feedback: FeedbackScheduler,
        clipboard: ClipboardSink,
        *,
        bridge: BillingBridge,
        billing: BillingClient | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        self._themes = themes
        self._entitlement = entitlement
        self._feedback = feedback
        self._clipboard = clipboard
        self._billing = billing
        self._conversation: ConversationSink | None = None

        self._state = SessionState.IDLE
        self._input_text = ""
        self._output_text = PLACEHOLDER_TEXT
        self._labels: dict[str, str] = dict(RESTING_CAPTIONS)
        self._presentation = PresentationStyle.COMPACT

        self._feedback.label_changed.connect(self._on_feedback_label)
        bridge.transaction.connect(self.handle_transaction)

    # -- read-only state --

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def output_text(self) -> str:
        return self._output_text

    @property
    def labels(self) -> dict[str, str]:
        return dict(self._labels)

    @property
    def has_content(self) -> bool:
        return self._state is SessionState.RANDOMIZED

    @property
    def is_unlocked(self) -> bool:
        return self._entitlement.is_unlocked()

    @property
    def conversation_available(self) -> bool:
        return self._conversation is not None

    @property
    def presentation(self) -> PresentationStyle:
        return self._presentation

    def outgoing_text(self) -> str:
        """Text handed to sinks: the output, plus the promo suffix when locked."""
        if self._entitlement.is_unlocked():
            return self._output_text
        return f"{self._output_text}{PROMO_SUFFIX}"

    # -- input / output --

    def input_changed(self, text: str) -> None:
        self._input_text = text or ""
        self._feedback.cancel_all()
        self._reset_captions()
        if not self._input_text:
            self._state = SessionState.IDLE
            self._set_output(PLACEHOLDER_TEXT)
        else:
            self._state = SessionState.RANDOMIZED
            self._set_output(randomize(self._input_text))

    def rerandomize(self) -> bool:
        self._feedback.cancel_all()
        self._reset_captions()
        if not self.has_content:
            return False
        self._set_output(randomize(self._output_text))
        return True

    # -- actions --

    def send(self) -> bool:
        return self._deliver(CONTROL_SEND, lambda conversation, text: conversation.send_text(text))

    def insert(self) -> bool:
        return self._deliver(CONTROL_INSERT, lambda conversation, text: conversation.insert_text(text))

    def copy(self) -> bool:
        if not self._require_content(CONTROL_COPY):
            return False
        self._clipboard.set_text(self.outgoing_text())
        self._flash(CONTROL_COPY, FLASH_LABELS[CONTROL_COPY])
        self._collapse()
        return True

    def _deliver(
        self,
        control_id: str,
        action: Callable[[ConversationSink, str], SinkOutcome],
    ) -> bool:
        if not self._require_content(control_id):
            return False
        conversation = self._conversation
        if conversation is None:
            error = RandomCaserError(ErrorCode.SINK_UNAVAILABLE, details={"control": control_id})
            logger.warning("%s ignored: %s", control_id, error.to_dict())
            return False

        text = self.outgoing_text()
        try:
            outcome = action(conversation, text)
        except Exception as exc:  # pragma: no cover - defensive boundary
            outcome = SinkOutcome.failure(f"{type(exc).__name__}: {exc}")

        label = FLASH_LABELS[control_id]
        if outcome is not None and not outcome.ok:
            message = outcome.error.message if outcome.error else ERROR_MESSAGES[ErrorCode.SINK_FAILED]
            reason = outcome.error.details.get("reason", "") if outcome.error else ""
            logger.warning("%s failed: %s %s", control_id, message, reason)
            self.sink_failed.emit(control_id, f"{message} {reason}".strip())
            if self._settings.show_failure_feedback:
                label = FAILURE_LABEL
        else:
            logger.info("%s delivered %d characters", control_id, len(text))

        self._flash(control_id, label)
        self._collapse()
        return True

    def _require_content(self, control_id: str) -> bool:
        if self.has_content:
            return True
        logger.info("%s pressed with no content", control_id)
        self.no_content.emit(NO_CONTENT_TITLE, ERROR_MESSAGES[ErrorCode.NO_CONTENT])
        return False

    def _flash(self, control_id: str, label: str) -> None:
        self._feedback.flash(
            control_id,
            label,
            RESTING_CAPTIONS[control_id],
            self._settings.feedback_delay_ms,
        )

    # -- lifecycle --

    def activate(self, conversation: ConversationSink | None = None) -> None:
        self._conversation = conversation
        self.conversation_available_changed.emit(conversation is not None)
        self._refresh_chrome()

        draft = self._settings.draft_text
        if draft:
            self.input_changed(draft)
        else:
            error = RandomCaserError(ErrorCode.STORAGE_MISSING, details={"key": DRAFT_TEXT_KEY})
            logger.info("draft text not restored: %s", error.to_dict())

    def deactivate(self) -> None:
        self._settings.draft_text = self._input_text or None
        self._entitlement.persist()

    # -- presentation --

    def begin_editing(self) -> None:
        if self._presentation is PresentationStyle.COMPACT:
            self.presentation_requested.emit(PresentationStyle.EXPANDED)

    def presentation_changed(self, style: PresentationStyle) -> None:
        self._presentation = style

    def _collapse(self) -> None:
        if self._presentation is PresentationStyle.EXPANDED:
            self.presentation_requested.emit(PresentationStyle.COMPACT)

    # -- theme --

    def select_theme(self, theme_id: str) -> bool:
        if not self._entitlement.is_unlocked():
            logger.info("theme switch to %s requires PRO", theme_id)
            return False
        theme = self._themes.get_theme(theme_id)
        if theme is None:
            error = RandomCaserError(ErrorCode.THEME_UNKNOWN, details={"theme_id": theme_id})
            logger.warning("theme selection rejected: %s", error.to_dict())
            return False
        self._themes.set_active(theme)
        self._apply_styles()
        self.theme_menu_changed.emit(self.theme_menu())
        return True

    def control_styles(self) -> dict[str, ButtonStyle]:
        theme = self._themes.active_theme()
        return {control_id: style_for(tier, theme) for control_id, tier in CONTROL_TIERS.items()}

    def theme_menu(self) -> list[ThemeMenuEntry]:
        return self._themes.menu_entries()

    def affordances(self) -> dict[str, bool]:
        unlocked = self._entitlement.is_unlocked()
        available = self._conversation is not None
        return {
            CONTROL_RANDOMIZE: True,
            CONTROL_SEND: available,
            CONTROL_INSERT: available,
            CONTROL_COPY: True,
            CONTROL_PURCHASE: not unlocked,
            CONTROL_RESTORE: not unlocked,
            CONTROL_THEME: unlocked,
        }

    # -- billing --

    def request_purchase(self) -> bool:
        if self._billing is None or self._entitlement.is_unlocked():
            return False
        self._billing.request_purchase(PRO_PRODUCT_ID)
        return True

    def request_restore(self) -> bool:
        if self._billing is None or self._entitlement.is_unlocked():
            return False
        self._billing.request_restore(PRO_PRODUCT_ID)
        return True

    def handle_transaction(self, event: TransactionEvent) -> None:
        if self._entitlement.apply_transaction(event):
            self.entitlement_changed.emit(True)
            self._refresh_chrome()
        elif event.outcome is TransactionOutcome.FAILED:
            self.purchase_failed.emit(event.reason or ERROR_MESSAGES[ErrorCode.BILLING_FAILED])

    # -- internals --

    def _set_output(self, text: str) -> None:
        self._output_text = text
        self.output_changed.emit(text)

    def _reset_captions(self) -> None:
        for control_id in ACTION_CONTROLS:
            self._set_label(control_id, RESTING_CAPTIONS[control_id], False)

    def _set_label(self, control_id: str, text: str, animated: bool) -> None:
        self._labels[control_id] = text
        self.label_changed.emit(control_id, text, animated)

    def _on_feedback_label(self, control_id: str, text: str, animated: bool) -> None:
        self._set_label(control_id, text, animated)

    def _apply_styles(self) -> None:
        self.stylesheet_theme_changed.emit(self._themes.active_theme())
        self.styles_changed.emit(self.control_styles())

    def _refresh_chrome(self) -> None:
        self._apply_styles()
        self.theme_menu_changed.emit(self.theme_menu())
        self.affordances_changed.emit(self.affordances())
