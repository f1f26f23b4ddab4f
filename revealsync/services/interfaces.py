"""Contracts of the collaborators the container drives."""
from pathlib import Path
from typing import Any, Callable, Optional, Protocol

from revealsync.core.config import Configuration

SaveFn = Callable[[str, Any], Path]


class BackingServer(Protocol):
    """Serves the presentation the preview surface embeds."""

    @property
    def uri(self) -> Optional[str]:
        """Base address, ``None`` until listening."""

    @property
    def is_listening(self) -> bool:
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def refresh(self) -> None:
        ...


class ServerFactory(Protocol):
    def __call__(
        self,
        root_dir: Callable[[], str],
        slide_content: Callable[[], Optional[str]],
        configuration: Callable[[], Configuration],
        is_in_export: Callable[[], bool],
        save: SaveFn,
        slide_count: Callable[[], int],
        export_pending: Callable[[], bool],
    ) -> BackingServer:
        ...


class RenderSurface(Protocol):
    """A web view; assigning ``html`` re-renders it."""
    html: str


class AuxiliaryView(Protocol):
    def update(self) -> None:
        ...
