"""Export endpoint: the preview posts rendered output back here."""
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from revealsync.core.errors import ExportPathError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


@router.post("/export/{request_id:path}")
async def save_export(request_id: str, request: Request) -> dict[str, Any]:
    """Store the posted body under ``request_id`` in the export directory."""
    source = request.app.state.source
    if not source.is_in_export():
        raise HTTPException(status_code=409, detail="No export in progress")

    body = await request.body()
    try:
        path = source.save(request_id, body)
    except ExportPathError as e:
        logger.warning(f"Rejected export write: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {"saved": str(path)}
