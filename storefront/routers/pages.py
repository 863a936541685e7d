"""Serves the static storefront pages from the configured frontend directory."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from storefront.config import Settings, get_settings

router = APIRouter()

INDEX_FILE = "index.html"


def resolve_frontend_file(frontend_dir: Path, requested: str) -> Path | None:
    """Map a request path to a file inside ``frontend_dir``.

    Paths that escape the directory or name nothing fall back to the index
    page so client-side routes keep working.
    """
    root = frontend_dir.resolve()
    index = root / INDEX_FILE
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return index if index.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
async def frontend(full_path: str, settings: Settings = Depends(get_settings)):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")
    target = resolve_frontend_file(settings.frontend_dir, full_path)
    if target is None:
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(target)
