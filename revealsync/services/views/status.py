"""Status view: one-line summary of the preview server state."""
import logging
from typing import Callable, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Listener = Callable[["StatusState"], None]


class StatusState(BaseModel):
    """Snapshot shown by the status indicator."""

    listening: bool = Field(default=False)
    uri: Optional[str] = Field(default=None)
    slide_count: int = Field(default=0, ge=0)

    @property
    def text(self) -> str:
        if not self.listening:
            return "reveal.js: stopped"
        noun = "slide" if self.slide_count == 1 else "slides"
        return f"reveal.js: {self.slide_count} {noun} at {self.uri}"


class StatusView:
    """Recomputes its state from the container's accessors on ``update()``."""

    def __init__(self, uri: Callable[[], Optional[str]], slide_count: Callable[[], int]):
        self._uri = uri
        self._slide_count = slide_count
        self._listeners: list[Listener] = []
        self.state = StatusState()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def update(self) -> None:
        uri = self._uri()
        self.state = StatusState(listening=uri is not None, uri=uri, slide_count=self._slide_count())
        logger.debug(self.state.text)
        for listener in self._listeners:
            listener(self.state)
