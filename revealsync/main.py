#!/usr/bin/env python3
"""
revealsync - Command Line Entry Point

Serves a markdown file as a live reveal.js presentation, or exports it.

Usage:
    python -m revealsync.main slides.md              # Serve and follow file changes
    python -m revealsync.main slides.md --line 42    # Start on the slide holding line 42
    python -m revealsync.main slides.md --export     # Export once and print the export path
"""
import argparse
import asyncio
import logging
import sys
import webbrowser
from pathlib import Path
from typing import Optional, Sequence

from revealsync.container import Container
from revealsync.core import get_settings, setup_logging
from revealsync.models import (
    Selection,
    TextDocument,
    TextEditor,
    TextEditorSelectionChangeEvent,
)

logger = logging.getLogger(__name__)

STARTUP_TIMEOUT = 10.0
WATCH_INTERVAL = 1.0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Live reveal.js preview for markdown slides")
    parser.add_argument("file", type=Path, help="Markdown presentation to serve")
    parser.add_argument("--line", type=int, default=None, help="Cursor line (0-based) to start on")
    parser.add_argument("--export", action="store_true", help="Export to HTML and exit")
    parser.add_argument("--no-browser", action="store_true", help="Do not open a browser")
    return parser.parse_args(argv)


async def wait_listening(container: Container, timeout: float = STARTUP_TIMEOUT) -> str:
    async def poll() -> str:
        while not container.server.is_listening:
            await asyncio.sleep(0.05)
        return container.get_uri(with_position=False) or ""

    return await asyncio.wait_for(poll(), timeout)


async def run(args: argparse.Namespace) -> int:
    def show_surface() -> None:
        if args.no_browser:
            logger.warning("Export is waiting for a preview; open the printed URL")
            return
        webbrowser.open(container.get_uri() or "")

    container = Container(show_surface=show_surface)
    document = TextDocument.from_path(args.file)
    editor = TextEditor(document)
    container.on_did_change_active_text_editor(editor)

    try:
        base_uri = await wait_listening(container)
    except asyncio.TimeoutError:
        logger.error("❌ Preview server did not start")
        container.dispose()
        return 1

    if args.line is not None:
        event = TextEditorSelectionChangeEvent(editor, [Selection.caret(args.line)])
        container.on_did_change_text_editor_selection(event)

    print(f"Serving {args.file} at {base_uri}")

    if args.export:
        try:
            export_path = await container.start_export()
        finally:
            container.dispose()
        if not container.exported:
            logger.error("❌ Export settled before any preview loaded the page; nothing was written")
            return 1
        print(f"Exported {len(container.exported)} file(s) to {export_path}")
        return 0

    if not args.no_browser:
        webbrowser.open(container.get_uri() or base_uri)

    last_text = document.get_text()
    try:
        while container.server.is_listening:
            await asyncio.sleep(WATCH_INTERVAL)
            text = args.file.read_text(encoding="utf-8")
            if text == last_text:
                continue
            last_text = text
            document.update(text)
            container.on_did_save_text_document(document)
            # Re-binding re-parses the document and bumps the server revision.
            position = container.position
            container.on_did_change_active_text_editor(editor)
            if position is not None:
                container.go_to_slide(position.horizontal, position.vertical)
    finally:
        container.dispose()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, get_settings().log_level))
    if not args.file.is_file():
        logger.error(f"❌ No such file: {args.file}")
        return 2
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
