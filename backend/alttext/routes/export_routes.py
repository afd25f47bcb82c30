from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from alttext.schemas import ResultRow
from alttext.services.csv_export_service import CSV_MEDIA_TYPE, csv_document, export_filename
from alttext.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["export"])
logger = get_logger(__name__)


@router.post("/export")
async def export_csv(request: Request) -> Response:
    """
    Turn ``{"rows": [...]}`` into a downloadable CSV document.
    Rows may be nested (``translations``) or flat records with one key per locale.
    """
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    raw_rows = body.get("rows") if isinstance(body, dict) else None
    if not isinstance(raw_rows, list):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    try:
        rows = [ResultRow.model_validate(r) for r in raw_rows]
    except ValidationError as exc:
        logger.warning("export rejected — malformed row: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    filename = export_filename()
    logger.info("Exporting %d row(s) as %s", len(rows), filename)
    return Response(
        content=csv_document(rows),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
