"""
Editor host model.

Plain dataclasses describing the documents, editors and events a host
(an editor integration, the CLI, or a test) feeds into the container.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

MARKDOWN_LANGUAGE_ID = "markdown"

_LANGUAGE_BY_SUFFIX = {
    ".md": MARKDOWN_LANGUAGE_ID,
    ".markdown": MARKDOWN_LANGUAGE_ID,
    ".mdown": MARKDOWN_LANGUAGE_ID,
    ".txt": "plaintext",
    ".py": "python",
    ".html": "html",
}


@dataclass(frozen=True)
class CursorPosition:
    """Zero-based line/character location inside a document."""
    line: int
    character: int = 0


@dataclass(frozen=True)
class Selection:
    """A selection; ``active`` is the end the cursor sits on."""
    anchor: CursorPosition
    active: CursorPosition

    @classmethod
    def caret(cls, line: int, character: int = 0) -> "Selection":
        """Empty selection at a single cursor location."""
        position = CursorPosition(line, character)
        return cls(anchor=position, active=position)


@dataclass(eq=False)
class TextDocument:
    """An open document. ``text`` is the live buffer content."""
    file_name: str
    language_id: str
    text: str = ""
    version: int = 1

    def get_text(self) -> str:
        return self.text

    def update(self, text: str) -> None:
        """Replace the buffer content, as an edit in the host would."""
        self.text = text
        self.version += 1

    @property
    def dirname(self) -> str:
        return str(Path(self.file_name).resolve().parent)

    @classmethod
    def from_path(cls, path: Path, language_id: Optional[str] = None) -> "TextDocument":
        """Open a file from disk, guessing the language from its suffix."""
        path = Path(path)
        language = language_id or _LANGUAGE_BY_SUFFIX.get(path.suffix.lower(), "plaintext")
        return cls(file_name=str(path), language_id=language, text=path.read_text(encoding="utf-8"))


@dataclass(eq=False)
class TextEditor:
    """An editor showing a document. Compared by identity."""
    document: TextDocument
    selections: list[Selection] = field(default_factory=list)


@dataclass
class TextEditorSelectionChangeEvent:
    text_editor: TextEditor
    selections: list[Selection] = field(default_factory=list)


@dataclass
class TextDocumentChangeEvent:
    document: TextDocument


@dataclass
class ConfigurationChangeEvent:
    """Names the configuration sections touched by a settings change."""
    sections: frozenset = frozenset()

    def affects_configuration(self, section: str) -> bool:
        return any(s == section or s.startswith(section + ".") for s in self.sections)
