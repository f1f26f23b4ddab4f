"""Preview server."""

from .service import PresentationSource, RevealServer, create_app

__all__ = [
    "PresentationSource",
    "RevealServer",
    "create_app",
]
