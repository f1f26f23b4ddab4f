"""
Render surface proxy.

Holds the preview surface (a web view) and pushes the presentation address
into it. The surface is written to, never read from.
"""
import html
import logging
import time
from typing import Callable, Optional

from revealsync.models.binding import UNBOUND, Binding, Bound, unwrap
from revealsync.models.position import SlidePosition
from revealsync.services.interfaces import RenderSurface

logger = logging.getLogger(__name__)

BLANK_URI = "about:blank"

SURFACE_HTML = """<style>html, body, iframe {{ height: 100% }}</style>
      <iframe src="{src}" frameBorder="0" style="width: 100%; height: 100%" />"""


def epoch_millis() -> int:
    return int(time.time() * 1000)


def build_uri(
    base: str,
    position: SlidePosition,
    with_position: bool = True,
    now: Callable[[], int] = epoch_millis,
) -> str:
    """
    ``base#/<horizontal>/<vertical>/<epochMillis>``, or ``base`` alone.

    The trailing timestamp only makes every navigation look new to the
    embedded frame.
    """
    if not with_position:
        return f"{base}"
    return f"{base}#/{position.as_fragment()}/{now()}"


def render_surface_html(uri: Optional[str]) -> str:
    """Container markup embedding ``uri`` in a full-size frame."""
    return SURFACE_HTML.format(src=html.escape(uri or BLANK_URI, quote=True))


class RenderSurfaceProxy:
    """Pushes the current presentation address into the attached surface."""

    def __init__(
        self,
        base_uri: Callable[[], Optional[str]],
        position: Callable[[], Optional[SlidePosition]],
        now: Callable[[], int] = epoch_millis,
    ):
        self._base_uri = base_uri
        self._position = position
        self._now = now
        self.binding: Binding[RenderSurface] = UNBOUND

    @property
    def surface(self) -> Optional[RenderSurface]:
        return unwrap(self.binding)

    @property
    def is_attached(self) -> bool:
        return isinstance(self.binding, Bound)

    def get_uri(self, with_position: bool = True) -> Optional[str]:
        """Current address, or ``None`` if the server is down or no document is bound."""
        base = self._base_uri()
        position = self._position()
        if base is None or position is None:
            return None
        return build_uri(base, position, with_position, self._now)

    def refresh(self, surface: Optional[RenderSurface] = None) -> bool:
        """
        Re-render the surface, first replacing it if ``surface`` is given.

        Returns False when no surface has been attached yet.
        """
        if surface is not None:
            self.binding = Bound(surface)
            logger.debug("Render surface attached")
        surface = self.surface
        if surface is None:
            return False
        surface.html = render_surface_html(self.get_uri())
        return True
