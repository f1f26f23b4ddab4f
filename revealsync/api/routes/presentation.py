"""Presentation endpoints serving the bound document to the preview."""
import json
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, Response
from fastapi.templating import Jinja2Templates

logger = logging.getLogger(__name__)
router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent.parent / "web" / "templates")


def get_source(request: Request):
    return request.app.state.source


def render_presentation(source, export_mode: bool) -> str:
    """Render the reveal.js page for the current document and configuration."""
    configuration = source.configuration()
    return templates.get_template("presentation.html").render(
        title=configuration.title,
        theme=configuration.theme,
        highlight_theme=configuration.highlight_theme,
        separator=configuration.separator,
        vertical_separator=configuration.vertical_separator,
        notes_separator=configuration.notes_separator,
        reveal_options=json.dumps(configuration.reveal_options()),
        content=source.slide_content() or "",
        revision=source.revision,
        export_mode=export_mode,
    )


@router.get("/", response_class=HTMLResponse)
async def presentation(request: Request) -> HTMLResponse:
    """
    Serve the presentation page.

    While an export is pending the rendered page is also saved as
    ``index.html``.
    """
    source = get_source(request)
    export_mode = source.is_in_export()
    page = render_presentation(source, export_mode)
    if export_mode:
        source.save("index.html", page)
    return HTMLResponse(page)


@router.get("/api/state")
async def state(request: Request) -> dict[str, Any]:
    """
    Preview state the page polls to know when to reload.

    Reads the export flag without counting as export activity, so a steady
    poll cannot hold an export open.
    """
    source = get_source(request)
    return {
        "revision": source.revision,
        "slide_count": source.slide_count(),
        "exporting": source.export_pending(),
    }


@router.get("/{file_path:path}")
async def document_file(file_path: str, request: Request) -> Response:
    """
    Serve an asset (image, stylesheet...) relative to the document directory.

    Registered last: the page resolves relative markdown links against ``/``,
    so ``![](logo.png)`` arrives here as ``/logo.png``.

    Security: paths resolving outside the document directory are refused.
    """
    source = get_source(request)
    root_dir = source.root_dir()
    if not root_dir:
        raise HTTPException(status_code=404, detail="No document bound")

    root = Path(root_dir).resolve()
    target = (root / file_path).resolve()
    if root not in target.parents or not target.is_file():
        raise HTTPException(status_code=404, detail="File not found")

    if source.is_in_export():
        source.save(file_path, target.read_bytes())
    return FileResponse(target)
