"""Data models for revealsync."""

from .binding import UNBOUND, Bound, Unbound, unwrap
from .editor import (
    MARKDOWN_LANGUAGE_ID,
    ConfigurationChangeEvent,
    CursorPosition,
    Selection,
    TextDocument,
    TextDocumentChangeEvent,
    TextEditor,
    TextEditorSelectionChangeEvent,
)
from .position import SlidePosition
from .slide import ParsedDocument, Slide, SlideBoundary

__all__ = [
    "UNBOUND",
    "Bound",
    "Unbound",
    "unwrap",
    "MARKDOWN_LANGUAGE_ID",
    "ConfigurationChangeEvent",
    "CursorPosition",
    "Selection",
    "TextDocument",
    "TextDocumentChangeEvent",
    "TextEditor",
    "TextEditorSelectionChangeEvent",
    "SlidePosition",
    "ParsedDocument",
    "Slide",
    "SlideBoundary",
]
