"""Document binding and markdown slide splitting."""

from .binding import DocumentBinding
from .parser import parse_markdown, split_front_matter

__all__ = [
    "DocumentBinding",
    "parse_markdown",
    "split_front_matter",
]
