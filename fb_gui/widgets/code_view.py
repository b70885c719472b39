"""Read-only code block with theme-aware syntax highlighting."""

from __future__ import annotations

from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from fb_gui.widgets.code_highlighter import CodeHighlighter


class CodeView(QPlainTextEdit):
    """Read-only code viewer.

    Every styling pass starts from a cleared document and a fresh
    highlighter, so formats from a previous feature or theme never carry over.
    """

    def __init__(self, parent: QWidget | None = None, theme: str = "dark") -> None:
        super().__init__(parent)
        self.setObjectName("codeView")
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))

        self._theme = theme
        self._code: str | None = None
        self._language: str | None = None
        self._highlighter: CodeHighlighter | None = None
        self._style_passes = 0

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def has_code(self) -> bool:
        return self._code is not None

    @property
    def highlighter(self) -> CodeHighlighter | None:
        return self._highlighter

    @property
    def style_passes(self) -> int:
        """Number of full restyles performed so far."""
        return self._style_passes

    def code_text(self) -> str:
        return self.toPlainText()

    def show_code(self, code: str, language: str | None = "javascript") -> None:
        """Display code and style it for the current theme."""
        self._code = code
        self._language = language
        self._restyle()

    def set_theme(self, theme: str) -> None:
        """Switch palettes; restyles immediately when code is shown."""
        self._theme = theme
        if self._code is not None:
            self._restyle()

    def _restyle(self) -> None:
        if self._highlighter is not None:
            self._highlighter.setDocument(None)
            self._highlighter.deleteLater()
            self._highlighter = None
        self.clear()

        self.setPlainText(self._code or "")
        self._highlighter = CodeHighlighter(self._language, self._theme, self)
        self._highlighter.setDocument(self.document())
        # setDocument only schedules a deferred pass
        self._highlighter.rehighlight()
        self._style_passes += 1
        self.verticalScrollBar().setValue(0)
