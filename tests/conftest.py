"""
Pytest configuration and fixtures.
"""
from typing import Optional

import pytest

from revealsync.container import Container
from revealsync.core import Configuration
from revealsync.models import TextDocument, TextEditor

DECK = """\
# Intro
---
# Agenda
--
## Details
---
# Outro
"""

FIXED_MILLIS = 1700000000000


class FakeServer:
    """In-memory stand-in for the preview server."""

    base_uri = "http://127.0.0.1:8000/"

    def __init__(self, root_dir, slide_content, configuration, is_in_export, save, slide_count, export_pending):
        self.root_dir = root_dir
        self.slide_content = slide_content
        self.configuration = configuration
        self.is_in_export = is_in_export
        self.save = save
        self.slide_count = slide_count
        self.export_pending = export_pending
        self.listening = False
        self.calls: list[str] = []

    @property
    def uri(self) -> Optional[str]:
        return self.base_uri if self.listening else None

    @property
    def is_listening(self) -> bool:
        return self.listening

    def start(self) -> None:
        self.calls.append("start")
        self.listening = True

    def stop(self) -> None:
        self.calls.append("stop")
        self.listening = False

    def refresh(self) -> None:
        self.calls.append("refresh")


class FakeSurface:
    """Web view double recording every render."""

    def __init__(self):
        self.renders: list[str] = []

    @property
    def html(self) -> str:
        return self.renders[-1] if self.renders else ""

    @html.setter
    def html(self, value: str) -> None:
        self.renders.append(value)


@pytest.fixture
def make_editor(tmp_path):
    """Factory creating an editor on a document stored in ``tmp_path``."""
    def _make(text: str = DECK, name: str = "deck.md", language_id: str = "markdown") -> TextEditor:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return TextEditor(TextDocument(file_name=str(path), language_id=language_id, text=text))
    return _make


@pytest.fixture
def configuration():
    """Presentation configuration independent of the environment."""
    return Configuration(title="Test deck")


@pytest.fixture
def container(configuration):
    """Container wired to a fake server and a fixed clock."""
    return Container(
        load_configuration=lambda: configuration,
        server_factory=FakeServer,
        quiet_period=0.2,
        now=lambda: FIXED_MILLIS,
    )


@pytest.fixture
def make_surface():
    """Factory for recording web view doubles."""
    return FakeSurface


@pytest.fixture
def surface(make_surface):
    return make_surface()


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    for var in [
        "REVEALSYNC_PORT",
        "REVEALSYNC_QUIET_PERIOD_MS",
        "REVEALSYNC_EXPORT_TIMEOUT_SECONDS",
        "REVEALJS_THEME",
        "REVEALJS_EXPORT_HTML_PATH",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def deck():
    """Three horizontal slides, the second with one vertical child."""
    return DECK


@pytest.fixture
def fake_server():
    """Server factory producing ``FakeServer`` instances."""
    return FakeServer
