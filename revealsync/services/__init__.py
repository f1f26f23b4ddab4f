"""Service layer for revealsync."""

from .document import DocumentBinding, parse_markdown
from .export import ExportCoordinator, QuietPeriodTimer, save_content
from .render_surface import RenderSurfaceProxy
from .server import RevealServer
from .views import SlideListView, StatusView

__all__ = [
    "DocumentBinding",
    "parse_markdown",
    "ExportCoordinator",
    "QuietPeriodTimer",
    "save_content",
    "RenderSurfaceProxy",
    "RevealServer",
    "SlideListView",
    "StatusView",
]
