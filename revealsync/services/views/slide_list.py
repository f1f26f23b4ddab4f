"""Slide list view: tree of horizontal slides and their vertical stacks."""
from typing import Callable

from pydantic import BaseModel, Field

from revealsync.models.slide import Slide


class SlideTreeItem(BaseModel):
    """A row of the slide list; selecting it navigates to ``(horizontal, vertical)``."""

    label: str
    horizontal: int = Field(..., ge=0)
    vertical: int = Field(default=0, ge=0)
    children: list["SlideTreeItem"] = Field(default_factory=list)


def build_tree(slides: list[Slide]) -> list[SlideTreeItem]:
    return [
        SlideTreeItem(
            label=slide.label,
            horizontal=slide.index,
            vertical=0,
            children=[
                SlideTreeItem(label=child.label, horizontal=child.index, vertical=child.vertical_index)
                for child in slide.vertical_children
            ],
        )
        for slide in slides
    ]


class SlideListView:
    """Rebuilds the slide tree from the container's slides on ``update()``."""

    def __init__(self, slides: Callable[[], list[Slide]]):
        self._slides = slides
        self._listeners: list[Callable[[list[SlideTreeItem]], None]] = []
        self.items: list[SlideTreeItem] = []

    def subscribe(self, listener: Callable[[list[SlideTreeItem]], None]) -> None:
        self._listeners.append(listener)

    def update(self) -> None:
        self.items = build_tree(self._slides())
        for listener in self._listeners:
            listener(self.items)
