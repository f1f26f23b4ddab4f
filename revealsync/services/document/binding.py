"""Document binding: an open editor paired with its derived slide model."""
import logging
from typing import Any, Optional

from revealsync.models.editor import MARKDOWN_LANGUAGE_ID, CursorPosition, TextEditor
from revealsync.models.position import SlidePosition
from revealsync.models.slide import ParsedDocument, Slide

from .parser import parse_markdown

logger = logging.getLogger(__name__)


class DocumentBinding:
    """
    Live pairing of an editor and the slides parsed from its document.

    The slide model is parsed lazily and only re-parsed on ``refresh()``;
    between refreshes ``slides`` may lag behind the buffer. The position is
    not re-clamped when a refresh shrinks the slide count.
    """

    def __init__(self, editor: TextEditor, options: Optional[dict[str, Any]] = None):
        self.editor = editor
        self._options = dict(options or {})
        self.position = SlidePosition()
        self._parsed: Optional[ParsedDocument] = None

    @property
    def document(self):
        return self.editor.document

    @property
    def parsed(self) -> ParsedDocument:
        if self._parsed is None:
            self._parsed = parse_markdown(self.document.get_text(), self._options)
        return self._parsed

    @property
    def slides(self) -> list[Slide]:
        return self.parsed.slides

    @property
    def slide_count(self) -> int:
        return self.parsed.slide_count

    @property
    def slide_content(self) -> str:
        """Markdown the presentation is rendered from (front matter stripped)."""
        return self.parsed.content

    @property
    def dirname(self) -> str:
        return self.document.dirname

    @property
    def has_front_config(self) -> bool:
        return bool(self.parsed.front_matter)

    @property
    def document_options(self) -> dict[str, Any]:
        return dict(self.parsed.front_matter or {})

    @property
    def is_markdown_file(self) -> bool:
        return self.document.language_id == MARKDOWN_LANGUAGE_ID

    def refresh(self) -> None:
        """Re-derive slides from the current buffer content."""
        self._parsed = parse_markdown(self.document.get_text(), self._options)
        logger.debug(f"Refreshed {self.document.file_name}: {self._parsed.slide_count} slides")

    def update_position(self, cursor: CursorPosition) -> None:
        """Move to the slide whose boundary precedes ``cursor``'s line."""
        boundary = None
        for candidate in self.parsed.boundaries:
            if candidate.start_line > cursor.line:
                break
            boundary = candidate
        if boundary is not None:
            self.position.move_to(boundary.horizontal, boundary.vertical)

    def go_to_slide(self, horizontal: int, vertical: int) -> None:
        """Set the position directly. Upper bounds are not checked."""
        self.position.move_to(horizontal, vertical)
