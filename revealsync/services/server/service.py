"""
Preview server.

A FastAPI app serving the bound document as a reveal.js page, run by
uvicorn as a task on the caller's event loop so request handlers and editor
events share one thread.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI

from revealsync.core.config import Configuration
from revealsync.services.interfaces import SaveFn

logger = logging.getLogger(__name__)


@dataclass
class PresentationSource:
    """Accessors the routes read the live presentation through."""
    root_dir: Callable[[], str]
    slide_content: Callable[[], Optional[str]]
    configuration: Callable[[], Configuration]
    is_in_export: Callable[[], bool]
    save: SaveFn
    slide_count: Callable[[], int]
    export_pending: Callable[[], bool]
    revision: int = 0


def create_app(source: PresentationSource) -> FastAPI:
    """Create the preview application for ``source``."""
    from revealsync.api.routes import export, presentation

    app = FastAPI(title="revealsync preview", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.source = source
    app.include_router(export.router, tags=["export"])
    # presentation.router ends with the document-asset catch-all
    app.include_router(presentation.router, tags=["presentation"])
    return app


class RevealServer:
    """Starts and stops the preview app; ``uri`` is ``None`` until it listens."""

    def __init__(
        self,
        root_dir: Callable[[], str],
        slide_content: Callable[[], Optional[str]],
        configuration: Callable[[], Configuration],
        is_in_export: Callable[[], bool],
        save: SaveFn,
        slide_count: Callable[[], int],
        export_pending: Callable[[], bool],
        host: str = "127.0.0.1",
        port: int = 0,
    ):
        self.source = PresentationSource(
            root_dir, slide_content, configuration, is_in_export, save, slide_count, export_pending
        )
        self.app = create_app(self.source)
        self.host = host
        self.port = port
        self._server: Optional[uvicorn.Server] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def is_listening(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def uri(self) -> Optional[str]:
        if not self.is_listening:
            return None
        return f"http://{self.host}:{self._bound_port()}/"

    def _bound_port(self) -> int:
        for server in getattr(self._server, "servers", None) or []:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.port

    def start(self) -> None:
        """Schedule the server on the running loop. No-op if already started."""
        if self._server is not None:
            return
        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level="warning",
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._task = asyncio.get_running_loop().create_task(self._server.serve())
        self._task.add_done_callback(self._on_exit)
        logger.info(f"🚀 Starting preview server on {self.host}:{self.port or 'auto'}")

    def _on_exit(self, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is None:
            return
        logger.error(f"Preview server crashed: {task.exception()}")
        # A task stopped before a restart must not clear its successor.
        if task is self._task:
            self._server = None

    def stop(self) -> None:
        if self._server is None:
            return
        self._server.should_exit = True
        self._server = None
        logger.info("👋 Preview server stopping")

    async def wait_closed(self) -> None:
        """Wait for a stopped server task to finish."""
        if self._task is not None:
            await self._task
            self._task = None

    def refresh(self) -> None:
        """Bump the revision the preview page polls, prompting a reload."""
        self.source.revision += 1
