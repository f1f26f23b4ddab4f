"""Core configuration module for revealsync."""

from .config import (
    EXTENSION_ID,
    Configuration,
    Settings,
    get_document_options,
    get_settings,
    load_configuration,
    merge_configuration,
    option_name,
)
from .errors import ExportPathError, ExportTimeoutError, RevealSyncError
from .logging import setup_logging

__all__ = [
    "EXTENSION_ID",
    "Configuration",
    "Settings",
    "get_settings",
    "get_document_options",
    "load_configuration",
    "merge_configuration",
    "option_name",
    "RevealSyncError",
    "ExportTimeoutError",
    "ExportPathError",
    "setup_logging",
]
