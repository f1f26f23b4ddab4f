"""Route modules of the preview server."""
