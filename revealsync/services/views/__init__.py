"""Auxiliary views refreshed by the container."""

from .slide_list import SlideListView, SlideTreeItem, build_tree
from .status import StatusState, StatusView

__all__ = [
    "SlideListView",
    "SlideTreeItem",
    "build_tree",
    "StatusState",
    "StatusView",
]
