from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from alttext.config.settings import settings

router = APIRouter()


def resolve_static(full_path: str) -> Path:
    """Map a request path to a file in the SPA build, falling back to its index.html."""
    root = Path(settings.static_dir).resolve()
    candidate = (root / full_path).resolve()
    if full_path and candidate.is_file() and candidate.is_relative_to(root):
        return candidate

    index = root / "index.html"
    if index.is_file():
        return index
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


# Registered last: catches every GET no other route matched.
@router.get("/{full_path:path}", include_in_schema=False)
async def serve_spa(full_path: str) -> FileResponse:
    return FileResponse(resolve_static(full_path))
