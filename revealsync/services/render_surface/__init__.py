"""Render surface proxy."""

from .service import RenderSurfaceProxy, build_uri, epoch_millis, render_surface_html

__all__ = [
    "RenderSurfaceProxy",
    "build_uri",
    "epoch_millis",
    "render_surface_html",
]
