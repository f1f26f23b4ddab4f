"""
Container: owns the live presentation state and keeps its views in step.

It connects the document binding, the preview server, the render surface,
the auxiliary views and the export coordinator, and reacts to editor-host
events in a fixed order.
"""
import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional

from revealsync.core.config import (
    EXTENSION_ID,
    Configuration,
    get_document_options,
    get_settings,
    load_configuration,
    merge_configuration,
)
from revealsync.models.binding import UNBOUND, Binding, Bound, unwrap
from revealsync.models.editor import (
    MARKDOWN_LANGUAGE_ID,
    ConfigurationChangeEvent,
    TextDocument,
    TextDocumentChangeEvent,
    TextEditor,
    TextEditorSelectionChangeEvent,
)
from revealsync.models.position import SlidePosition
from revealsync.models.slide import Slide
from revealsync.services.document import DocumentBinding
from revealsync.services.export import ExportCoordinator, save_content
from revealsync.services.interfaces import AuxiliaryView, BackingServer, RenderSurface, ServerFactory
from revealsync.services.render_surface import RenderSurfaceProxy, epoch_millis
from revealsync.services.server import RevealServer
from revealsync.services.views import SlideListView, StatusView

logger = logging.getLogger(__name__)


def _log_missing_surface() -> None:
    logger.warning("Export requested but no preview surface is attached")


class Container:
    """
    Top-level state owner.

    Every collaborator is injected or built from injected factories, so
    independent containers can coexist (one per host window, one per test).
    """

    def __init__(
        self,
        load_configuration: Callable[[], Configuration] = load_configuration,
        server_factory: Optional[ServerFactory] = None,
        show_surface: Callable[[], Any] = _log_missing_surface,
        quiet_period: Optional[float] = None,
        export_timeout: Optional[float] = None,
        now: Callable[[], int] = epoch_millis,
    ):
        settings = get_settings()
        self._load_configuration = load_configuration
        self._configuration = self._load_configuration()
        self._show_surface = show_surface
        self.binding: Binding[DocumentBinding] = UNBOUND
        self.exported: list[Path] = []

        if server_factory is None:
            def server_factory(*accessors):
                return RevealServer(*accessors, host=settings.host, port=settings.port)

        self.server: BackingServer = server_factory(
            lambda: self.root_dir,
            lambda: self.slide_content,
            lambda: self.configuration,
            lambda: self.is_in_export,
            lambda request_id, data: self._save(request_id, data),
            lambda: self.slide_count,
            lambda: self.exporter.pending,
        )

        self.surface = RenderSurfaceProxy(
            base_uri=lambda: self.server.uri if self.server.is_listening else None,
            position=lambda: self.position,
            now=now,
        )

        self.exporter = ExportCoordinator(
            path_provider=lambda: self.export_path,
            quiet_period=settings.quiet_period if quiet_period is None else quiet_period,
            timeout=settings.export_timeout_seconds if export_timeout is None else export_timeout,
        )

        self.status_view = StatusView(lambda: self.server.uri, lambda: self.slide_count)
        self.slide_list_view = SlideListView(lambda: self.slides)
        self.views: list[AuxiliaryView] = [self.status_view, self.slide_list_view]
        self.update_views()

    # ------------------------------------------------------------------
    # Editor-host events
    # ------------------------------------------------------------------

    def on_did_change_text_editor_selection(self, event: TextEditorSelectionChangeEvent) -> None:
        document = self.document_binding
        if document is None:
            return
        if event.text_editor is not document.editor or not event.selections:
            return

        document.update_position(event.selections[0].active)

        # The surface must see the position before the refresh moves slide boundaries.
        self.refresh_web_view()
        document.refresh()
        self.update_views()

    def on_did_change_active_text_editor(self, editor: Optional[TextEditor]) -> None:
        if editor is not None and editor.document.language_id == MARKDOWN_LANGUAGE_ID:
            self.binding = Bound(DocumentBinding(editor, get_document_options(self._configuration)))
            logger.info(f"Bound {editor.document.file_name}")
        else:
            self.binding = UNBOUND

        self.server.start()
        self.server.refresh()
        self.refresh_web_view()
        self.update_views()

    def on_did_change_text_document(self, event: TextDocumentChangeEvent) -> None:
        logger.debug(f"Document changed: {event.document.file_name}")

    def on_did_save_text_document(self, document: TextDocument) -> None:
        logger.debug(f"Document saved: {document.file_name}")

    def on_did_close_text_document(self, document: TextDocument) -> None:
        logger.debug(f"Document closed: {document.file_name}")

    def on_did_change_configuration(self, event: ConfigurationChangeEvent) -> None:
        if not event.affects_configuration(EXTENSION_ID):
            return
        self._configuration = self._load_configuration()
        logger.info("Configuration reloaded")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def go_to_slide(self, horizontal: int, vertical: int) -> None:
        document = self.document_binding
        if document is not None:
            document.go_to_slide(horizontal, vertical)
        self.refresh_web_view()

    def stop_server(self) -> None:
        self.server.stop()
        self.status_view.update()

    def refresh_web_view(self, surface: Optional[RenderSurface] = None) -> None:
        self.surface.refresh(surface)

    def get_uri(self, with_position: bool = True) -> Optional[str]:
        return self.surface.get_uri(with_position)

    def update_views(self) -> None:
        for view in self.views:
            view.update()

    def start_export(self) -> asyncio.Future:
        """
        Start an export, or join the one in progress.

        The future resolves with the export path once the preview has gone a
        full quiet period without asking whether an export is running.
        ``exported`` lists the files written by the current export.
        """
        if not self.exporter.pending:
            self.exported = []
        future = self.exporter.start()
        if self.surface.is_attached:
            self.refresh_web_view()
        else:
            self._show_surface()
        return future

    def dispose(self) -> None:
        """Stop the server and abandon a pending export."""
        self.exporter.dispose()
        self.server.stop()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def document_binding(self) -> Optional[DocumentBinding]:
        return unwrap(self.binding)

    @property
    def configuration(self) -> Configuration:
        """Base configuration, overlaid with the document's front matter."""
        document = self.document_binding
        if document is not None and document.has_front_config:
            return merge_configuration(self._configuration, document.document_options)
        return self._configuration

    @property
    def is_in_export(self) -> bool:
        return self.exporter.is_in_export()

    @property
    def position(self) -> Optional[SlidePosition]:
        document = self.document_binding
        return document.position if document is not None else None

    @property
    def root_dir(self) -> str:
        document = self.document_binding
        return document.dirname if document is not None else ""

    @property
    def slide_content(self) -> Optional[str]:
        document = self.document_binding
        return document.slide_content if document is not None else None

    @property
    def slides(self) -> list[Slide]:
        document = self.document_binding
        return document.slides if document is not None else []

    @property
    def slide_count(self) -> int:
        document = self.document_binding
        return document.slide_count if document is not None else 0

    def is_markdown_file(self) -> bool:
        document = self.document_binding
        return document.is_markdown_file if document is not None else False

    @property
    def export_path(self) -> str:
        """Configured export directory, else ``<root_dir>/export``."""
        configured = self.configuration.export_html_path
        if configured:
            return str(Path(self.root_dir or os.getcwd()) / Path(configured).expanduser())
        return os.path.join(self.root_dir, "export")

    def _save(self, request_id: str, data: Any) -> Path:
        path = save_content(lambda: self.export_path, request_id, data)
        self.exported.append(path)
        return path
