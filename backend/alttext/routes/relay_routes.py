from typing import List

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from alttext.config.settings import settings
from alttext.schemas import DescribedItem, DescribeResponse, TranslateResponse
from alttext.services.description_service import ImageUpload, description_service
from alttext.services.translation_service import translation_service
from alttext.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["alt-text"])
logger = get_logger(__name__)


# ─────────────────────────────────────────────────────────────
# POST /api/describe
# multipart form, zero or more parts named "files"
# ─────────────────────────────────────────────────────────────

@router.post("/describe", response_model=DescribeResponse)
async def describe(request: Request):
    """
    Describe a batch of images. Returns ``{"results": [{filename, english_alt}]}``
    in submission order; a single provider failure fails the whole batch.
    """
    images: List[ImageUpload] = []
    # Closing the form releases any spooled temporary files.
    async with request.form() as form:
        parts: List[UploadFile] = [f for f in form.getlist("files") if isinstance(f, UploadFile)]
        for part in parts:
            data = await part.read()
            if len(data) > settings.max_upload_bytes:
                logger.warning("describe rejected — %s is %d bytes", part.filename, len(data))
                raise HTTPException(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    detail=f"{part.filename} exceeds the {settings.max_upload_bytes} byte limit.",
                )
            images.append(ImageUpload(filename=part.filename or "", data=data, media_type=part.content_type))

    if not images:
        return DescribeResponse(results=[])

    try:
        results = await description_service.describe_images(images)
    except Exception:
        logger.exception("describe failed for %d image(s)", len(images))
        return PlainTextResponse("Describe error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return DescribeResponse(results=results)


# ─────────────────────────────────────────────────────────────
# POST /api/translate
# JSON body { items: DescribedItem[], locales: string[] }
# ─────────────────────────────────────────────────────────────

@router.post("/translate", response_model=TranslateResponse)
async def translate(request: Request):
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    items = body.get("items") if isinstance(body, dict) else None
    locales = body.get("locales") if isinstance(body, dict) else None
    if not isinstance(items, list) or not isinstance(locales, list):
        logger.warning("translate rejected — items/locales must both be arrays")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    try:
        described = [DescribedItem.model_validate(it) for it in items]
    except ValidationError as exc:
        logger.warning("translate rejected — malformed item: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad request")

    requested = [lc for lc in locales if isinstance(lc, str)]

    try:
        rows = await translation_service.translate_items(described, requested)
    except Exception:
        logger.exception("translate failed for %d item(s)", len(described))
        return PlainTextResponse("Translate error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return TranslateResponse(rows=rows)
