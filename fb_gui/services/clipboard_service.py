"""System clipboard access."""

from __future__ import annotations

import logging

from PySide6.QtGui import QClipboard, QGuiApplication

logger = logging.getLogger(__name__)


class ClipboardService:
    """Write text to the system clipboard and confirm the write."""

    def __init__(self, clipboard: QClipboard | None = None) -> None:
        self._clipboard = clipboard

    def _resolve(self) -> QClipboard | None:
        if self._clipboard is not None:
            return self._clipboard
        if QGuiApplication.instance() is None:
            return None
        return QGuiApplication.clipboard()

    def write(self, text: str) -> bool:
        """Copy text. Returns True once the clipboard reports the new text."""
        clipboard = self._resolve()
        if clipboard is None:
            logger.debug("No clipboard available; copy skipped")
            return False
        clipboard.setText(text)
        confirmed = clipboard.text() == text
        if not confirmed:
            logger.debug("Clipboard did not confirm copied text")
        return confirmed
