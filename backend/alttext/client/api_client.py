from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from alttext.config.locales import LOCALES
from alttext.client.validator import UploadCandidate
from alttext.schemas import DescribedItem, ResultRow
from alttext.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


class ApiError(Exception):
    """A describe/translate call failed or answered with an unexpected shape."""


class AltTextApiClient:
    """
    Thin client for the relay's /api/describe and /api/translate routes.

    No timeout is applied unless one is passed in; no request is retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "AltTextApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def describe(self, candidates: Sequence[UploadCandidate]) -> List[DescribedItem]:
        files = [("files", (c.filename, c.data, c.media_type)) for c in candidates]
        logger.info("Uploading %d image(s) for description", len(files))
        response = self._client.post("/api/describe", files=files)
        if response.is_error:
            raise ApiError(f"Describe API failed ({response.status_code}). {response.text}".strip())

        results = self._json(response).get("results")
        if not isinstance(results, list):
            raise ApiError("Bad describe API response")
        try:
            return [DescribedItem.model_validate(r) for r in results]
        except ValidationError as exc:
            raise ApiError("Bad describe API response") from exc

    def translate(self, items: Sequence[DescribedItem], locales: Sequence[str] = LOCALES) -> List[ResultRow]:
        payload = {"items": [item.model_dump() for item in items], "locales": list(locales)}
        logger.info("Requesting translations for %d item(s)", len(items))
        response = self._client.post("/api/translate", json=payload)
        if response.is_error:
            raise ApiError(f"Translate API failed ({response.status_code}). {response.text}".strip())

        rows = self._json(response).get("rows")
        if not isinstance(rows, list):
            raise ApiError("Bad translate API response")
        try:
            return [ResultRow.model_validate(r) for r in rows]
        except ValidationError as exc:
            raise ApiError("Bad translate API response") from exc

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError(f"Invalid JSON from {response.request.url.path}") from exc
        return data if isinstance(data, dict) else {}
