"""Export coordination and writing."""

from .coordinator import DEFAULT_QUIET_PERIOD, ExportCoordinator, ExportSession, QuietPeriodTimer
from .writer import resolve_export_target, save_content

__all__ = [
    "DEFAULT_QUIET_PERIOD",
    "ExportCoordinator",
    "ExportSession",
    "QuietPeriodTimer",
    "resolve_export_target",
    "save_content",
]
