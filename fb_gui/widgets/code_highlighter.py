"""Regex-based syntax highlighting for example code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from PySide6.QtCore import QObject
from PySide6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat, QTextDocument

# ── Palettes (one per theme) ──
PALETTES: Final[dict[str, dict[str, str]]] = {
    "dark": {
        "keyword": "#c678dd",
        "literal": "#d19a66",
        "builtin": "#e5c07b",
        "number": "#d19a66",
        "string": "#98c379",
        "comment": "#7f848e",
        "function": "#61afef",
        "property": "#e06c75",
    },
    "light": {
        "keyword": "#d73a49",
        "literal": "#005cc5",
        "builtin": "#6f42c1",
        "number": "#005cc5",
        "string": "#032f62",
        "comment": "#6a737d",
        "function": "#6f42c1",
        "property": "#e36209",
    },
}

# ── Keyword lists ──
JS_KEYWORDS: Final[frozenset[str]] = frozenset({
    "async", "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "export", "extends",
    "finally", "for", "from", "function", "get", "if", "import", "in",
    "instanceof", "let", "new", "of", "return", "set", "static", "super",
    "switch", "this", "throw", "try", "typeof", "var", "void", "while",
    "with", "yield",
})
JS_LITERALS: Final[frozenset[str]] = frozenset({
    "true", "false", "null", "undefined", "NaN", "Infinity",
})
JS_BUILTINS: Final[frozenset[str]] = frozenset({
    "Array", "BigInt", "Boolean", "Date", "Error", "JSON", "Map", "Math",
    "Number", "Object", "Promise", "Proxy", "Reflect", "RegExp", "Set",
    "String", "Symbol", "TypeError", "RangeError", "WeakMap", "WeakSet",
    "console", "document", "window", "globalThis",
})

LANGUAGE_ALIASES: Final[dict[str, str]] = {
    "javascript": "javascript",
    "js": "javascript",
}


@dataclass(frozen=True)
class _Rule:
    pattern: re.Pattern[str]
    style: str
    group: int = 0


def _words(words: frozenset[str]) -> str:
    return r"\b(?:" + "|".join(sorted(words)) + r")\b"


# Later rules win where ranges overlap.
_JS_RULES: Final[tuple[_Rule, ...]] = (
    _Rule(re.compile(r"\.([A-Za-z_$][\w$]*)\b"), "property", 1),
    _Rule(re.compile(r"\b([A-Za-z_$][\w$]*)\s*(?=\()"), "function", 1),
    _Rule(re.compile(_words(JS_BUILTINS)), "builtin"),
    _Rule(re.compile(_words(JS_KEYWORDS)), "keyword"),
    _Rule(re.compile(_words(JS_LITERALS)), "literal"),
    _Rule(re.compile(r"\b(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?n?)\b"), "number"),
)

# Opening token of a string or comment; spans are scanned left to right so a
# marker inside one never starts another.
_SPAN_START: Final[re.Pattern[str]] = re.compile(r"//|/\*|[`'\"]")

# Block states carried to the next line.
_STATE_NONE: Final[int] = 0
_STATE_IN_COMMENT: Final[int] = 1
_STATE_IN_TEMPLATE: Final[int] = 2


def normalize_language(language: str | None) -> str | None:
    """Map a language tag to a supported highlighter, or None for plain text."""
    if not language:
        return None
    return LANGUAGE_ALIASES.get(language.strip().lower())


def build_formats(theme: str) -> dict[str, QTextCharFormat]:
    """Create character formats for a theme's palette."""
    palette = PALETTES.get(theme, PALETTES["dark"])
    formats: dict[str, QTextCharFormat] = {}
    for style, color in palette.items():
        fmt = QTextCharFormat()
        fmt.setForeground(QColor(color))
        if style == "keyword":
            fmt.setFontWeight(QFont.Weight.Bold)
        if style == "comment":
            fmt.setFontItalic(True)
        formats[style] = fmt
    return formats


class CodeHighlighter(QSyntaxHighlighter):
    """Syntax highlighter for one language and one theme.

    Instances are not restyled in place: callers replace the highlighter
    when the code or theme changes.
    """

    def __init__(
        self,
        language: str | None,
        theme: str,
        parent: QObject | QTextDocument | None = None,
    ) -> None:
        super().__init__(parent)
        self._language = normalize_language(language)
        self._theme = theme if theme in PALETTES else "dark"
        self._formats = build_formats(self._theme)
        self._rules: tuple[_Rule, ...] = _JS_RULES if self._language else ()

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def theme(self) -> str:
        return self._theme

    def highlightBlock(self, text: str) -> None:  # noqa: N802 (Qt override)
        if not self._rules:
            return

        for rule in self._rules:
            fmt = self._formats[rule.style]
            for match in rule.pattern.finditer(text):
                start, end = match.span(rule.group)
                if end > start:
                    self.setFormat(start, end - start, fmt)

        self._highlight_spans(text)

    def _highlight_spans(self, text: str) -> None:
        """Paint strings and comments over the token colours."""
        self.setCurrentBlockState(_STATE_NONE)
        pos = 0

        previous = self.previousBlockState()
        if previous == _STATE_IN_COMMENT:
            pos = self._close_comment(text, 0, 0)
        elif previous == _STATE_IN_TEMPLATE:
            pos = self._close_string(text, 0, 0, "`")

        while 0 <= pos < len(text):
            match = _SPAN_START.search(text, pos)
            if match is None:
                return
            token, start = match.group(), match.start()
            if token == "//":
                self.setFormat(start, len(text) - start, self._formats["comment"])
                return
            if token == "/*":
                pos = self._close_comment(text, start, match.end())
            else:
                pos = self._close_string(text, start, match.end(), token)

    def _close_comment(self, text: str, start: int, search_from: int) -> int:
        end = text.find("*/", search_from)
        if end < 0:
            self.setFormat(start, len(text) - start, self._formats["comment"])
            self.setCurrentBlockState(_STATE_IN_COMMENT)
            return -1
        self.setFormat(start, end + 2 - start, self._formats["comment"])
        return end + 2

    def _close_string(self, text: str, start: int, search_from: int, quote: str) -> int:
        end = _find_closing_quote(text, search_from, quote)
        if end < 0:
            # Only template literals span lines; other quotes stop at the line end.
            self.setFormat(start, len(text) - start, self._formats["string"])
            if quote == "`":
                self.setCurrentBlockState(_STATE_IN_TEMPLATE)
            return -1
        self.setFormat(start, end + 1 - start, self._formats["string"])
        return end + 1


def _find_closing_quote(text: str, pos: int, quote: str) -> int:
    """Index of the unescaped quote at or after pos, or -1."""
    while pos < len(text):
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == quote:
            return pos
        pos += 1
    return -1
