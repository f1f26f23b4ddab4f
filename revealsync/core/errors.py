"""Exception types raised by revealsync."""


class RevealSyncError(Exception):
    """Base class for revealsync errors."""


class ExportTimeoutError(RevealSyncError):
    """A pending export did not settle within the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(f"Export did not settle within {timeout:g}s")
        self.timeout = timeout


class ExportPathError(RevealSyncError):
    """An export request tried to write outside the export directory."""
