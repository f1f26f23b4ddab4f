"""Export writer: stores pages posted back by the preview during an export."""
import logging
from pathlib import Path
from typing import Callable, Union

from revealsync.core.errors import ExportPathError

logger = logging.getLogger(__name__)


def resolve_export_target(export_dir: Union[str, Path], request_id: str) -> Path:
    """
    Map a request id (a URL path such as ``index.html`` or ``lib/app.css``)
    to a file inside ``export_dir``.

    Security: ids that resolve outside the export directory are rejected.
    """
    root = Path(export_dir).resolve()
    relative = request_id.lstrip("/") or "index.html"
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        raise ExportPathError(f"Refusing to write outside {root}: {request_id}")
    if target == root:
        raise ExportPathError(f"Export target is the export directory itself: {request_id}")
    return target


def save_content(
    path_provider: Callable[[], str],
    request_id: str,
    data: Union[str, bytes],
) -> Path:
    """Write ``data`` for ``request_id`` under the current export path."""
    target = resolve_export_target(path_provider(), request_id)
    target.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        target.write_bytes(data)
    else:
        target.write_text(data, encoding="utf-8")
    logger.info(f"Exported {request_id} -> {target}")
    return target
