"""API routes for the revealsync preview server."""

from .routes import export, presentation

__all__ = [
    "export",
    "presentation",
]
