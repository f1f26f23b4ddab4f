"""Slide-related Pydantic models."""
from typing import Optional

from pydantic import BaseModel, Field


class Slide(BaseModel):
    """One slide of a markdown presentation."""

    index: int = Field(..., ge=0, description="Top-level slide index")
    vertical_index: int = Field(default=0, ge=0, description="Index inside the vertical stack")
    title: str = Field(default="", description="First heading of the slide, if any")
    text: str = Field(default="", description="Slide markdown without separators")
    start_line: int = Field(..., ge=0, description="First document line of the slide")
    end_line: int = Field(..., ge=0, description="Last document line of the slide")
    vertical_children: list["Slide"] = Field(
        default_factory=list,
        description="Nested slides below this one"
    )

    @property
    def label(self) -> str:
        """Display label used by the slide list."""
        if self.title:
            return self.title
        if self.vertical_index:
            return f"Slide {self.index + 1}.{self.vertical_index}"
        return f"Slide {self.index + 1}"


class SlideBoundary(BaseModel):
    """Entry of the boundary table used to map a cursor line to a slide."""

    start_line: int = Field(..., ge=0)
    horizontal: int = Field(..., ge=0)
    vertical: int = Field(default=0, ge=0)


class ParsedDocument(BaseModel):
    """Result of splitting a markdown document into slides."""

    slides: list[Slide] = Field(default_factory=list)
    boundaries: list[SlideBoundary] = Field(default_factory=list)
    front_matter: Optional[dict] = Field(default=None, description="Front matter mapping, if present")
    content: str = Field(default="", description="Document text without the front matter")

    @property
    def slide_count(self) -> int:
        """Number of slides including vertical children."""
        return sum(1 + len(slide.vertical_children) for slide in self.slides)
