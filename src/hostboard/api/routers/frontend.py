"""
Front-end router - serves the built single-page app.

Registered last so it only sees paths no API route claimed.  A request
for an existing file under ``static_dir`` gets that file; every other
path gets ``index.html`` so client-side routing works.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, Response

from hostboard.api.deps import Settings
from hostboard.api.middleware.errors import error_response

router = APIRouter()


def resolve_static_file(static_dir: str | Path, request_path: str) -> Path | None:
    """Map a URL path to a file inside *static_dir*, or ``None``.

    Paths escaping the directory (``..``) never resolve.
    """
    root = Path(static_dir).resolve()
    candidate = (root / request_path.lstrip("/")).resolve()
    if not candidate.is_relative_to(root):
        return None
    return candidate if candidate.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Settings) -> Response:
    asset = resolve_static_file(settings.static_dir, full_path) if full_path else None
    if asset is not None:
        return FileResponse(asset)

    index = Path(settings.static_dir) / "index.html"
    if index.is_file():
        return FileResponse(index)
    return error_response(
        status=404,
        error="Not Found",
        details=f"No front end built in '{settings.static_dir}'",
    )
