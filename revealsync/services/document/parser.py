"""
Markdown slide splitter.

Splits a reveal.js markdown document into horizontal slides and their
vertical stacks, and records the line each slide starts on so a cursor line
can be mapped back to a slide coordinate.
"""
import logging
import re
from typing import Any, Optional

import yaml

from revealsync.core.config import option_name
from revealsync.models.slide import ParsedDocument, Slide, SlideBoundary

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = r"^\s*---\s*$"
DEFAULT_VERTICAL_SEPARATOR = r"^\s*--\s*$"
SEPARATOR_OPTIONS = ("separator", "vertical_separator")

_FRONT_MATTER_FENCE = re.compile(r"^---\s*$")
_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$")


def split_front_matter(lines: list[str]) -> tuple[Optional[dict], int]:
    """
    Extract a leading YAML front matter block.

    Returns the parsed mapping (or None) and the number of lines it used,
    fences included. Raises ``yaml.YAMLError`` on malformed YAML.
    """
    if not lines or not _FRONT_MATTER_FENCE.match(lines[0]):
        return None, 0
    for end in range(1, len(lines)):
        if _FRONT_MATTER_FENCE.match(lines[end]):
            data = yaml.safe_load("\n".join(lines[1:end]))
            if isinstance(data, dict):
                return data, end + 1
            # A bare leading rule, not front matter.
            return None, 0
    return None, 0


def separator_options(options: dict[str, Any], front_matter: Optional[dict]) -> dict[str, Any]:
    """
    ``options`` with the document's own separators applied.

    Front matter may set ``separator`` / ``vertical_separator`` (or their
    camelCase spelling); the page is rendered with the same overlay, so the
    slides split here line up with the slides reveal.js shows.
    """
    effective = dict(options)
    for key, value in (front_matter or {}).items():
        name = option_name(str(key))
        if name in SEPARATOR_OPTIONS and value:
            effective[name] = str(value)
    return effective


def _title_of(lines: list[str]) -> str:
    for line in lines:
        match = _HEADING.match(line)
        if match:
            return match.group(1)
    return ""


def _split(
    lines: list[str],
    offset: int,
    separator: re.Pattern,
    vertical_separator: re.Pattern,
) -> tuple[list[Slide], list[SlideBoundary]]:
    slides: list[Slide] = []
    boundaries = [SlideBoundary(start_line=0, horizontal=0, vertical=0)]
    horizontal, vertical = 0, 0
    chunk: list[str] = []
    chunk_start = offset

    def close(end_line: int) -> None:
        slide = Slide(
            index=horizontal,
            vertical_index=vertical,
            title=_title_of(chunk),
            text="\n".join(chunk).strip("\n"),
            start_line=chunk_start,
            end_line=max(chunk_start, end_line),
        )
        if vertical == 0:
            slides.append(slide)
        else:
            slides[-1].vertical_children.append(slide)

    for number, line in enumerate(lines, start=offset):
        if separator.match(line):
            close(number - 1)
            horizontal, vertical = horizontal + 1, 0
        elif vertical_separator.match(line):
            close(number - 1)
            vertical += 1
        else:
            chunk.append(line)
            continue
        chunk = []
        chunk_start = number + 1
        boundaries.append(SlideBoundary(start_line=number, horizontal=horizontal, vertical=vertical))

    close(offset + len(lines) - 1)
    return slides, boundaries


def parse_markdown(text: str, options: Optional[dict[str, Any]] = None) -> ParsedDocument:
    """
    Split ``text`` into slides.

    Never raises: a document that cannot be parsed (bad separator regex,
    malformed front matter) yields an empty ``ParsedDocument``.
    """
    lines = text.splitlines()
    try:
        front_matter, consumed = split_front_matter(lines)
        options = separator_options(options or {}, front_matter)
        separator = re.compile(options.get("separator") or DEFAULT_SEPARATOR)
        vertical_separator = re.compile(options.get("vertical_separator") or DEFAULT_VERTICAL_SEPARATOR)
    except (re.error, yaml.YAMLError) as e:
        logger.warning(f"Could not parse document, treating it as empty: {e}")
        return ParsedDocument()

    body = lines[consumed:]
    content = "\n".join(body)
    if not content.strip():
        return ParsedDocument(front_matter=front_matter, content=content)

    slides, boundaries = _split(body, consumed, separator, vertical_separator)
    return ParsedDocument(
        slides=slides,
        boundaries=boundaries,
        front_matter=front_matter,
        content=content,
    )
