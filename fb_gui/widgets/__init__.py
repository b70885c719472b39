"""Reusable Qt widgets."""

from fb_gui.widgets.code_highlighter import CodeHighlighter
from fb_gui.widgets.code_view import CodeView
from fb_gui.widgets.feature_list import FeatureList
from fb_gui.widgets.notes_list import NotesList

__all__ = [
    "CodeHighlighter",
    "CodeView",
    "FeatureList",
    "NotesList",
]
