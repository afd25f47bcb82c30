import base64
from dataclasses import dataclass
from typing import List, Optional

from openai import AsyncOpenAI

from alttext.config.settings import settings
from alttext.prompts.alt_text_prompts import (
    DESCRIBE_SYSTEM_PROMPT,
    DESCRIBE_USER_PROMPT,
    FALLBACK_ALT_TEXT,
)
from alttext.schemas import DescribedItem
from alttext.services.openai_client import get_openai_client
from alttext.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MEDIA_TYPE = "image/jpeg"


@dataclass
class ImageUpload:
    filename: str
    data: bytes
    media_type: Optional[str] = None


class DescriptionService:
    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        return self._client or get_openai_client()

    async def describe_image(self, image: ImageUpload) -> str:
        """
        Ask the vision model for one short English alt text.
        Provider errors propagate to the caller.
        """
        media_type = image.media_type or DEFAULT_MEDIA_TYPE
        b64 = base64.b64encode(image.data).decode("ascii")

        logger.info("Describing %s (%s, %d bytes)", image.filename, media_type, len(image.data))
        response = await self.client.chat.completions.create(
            model=settings.describe_model,
            messages=[
                {"role": "system", "content": DESCRIBE_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": DESCRIBE_USER_PROMPT},
                        {"type": "image_url", "image_url": {"url": f"data:{media_type};base64,{b64}"}},
                    ],
                },
            ],
            temperature=settings.temperature,
        )
        content = response.choices[0].message.content if response.choices else None
        return (content or "").strip() or FALLBACK_ALT_TEXT

    async def describe_images(self, images: List[ImageUpload]) -> List[DescribedItem]:
        """Describe every image in submission order; the first failure aborts the batch."""
        results: List[DescribedItem] = []
        for image in images:
            english_alt = await self.describe_image(image)
            results.append(DescribedItem(filename=image.filename, english_alt=english_alt))
        logger.info("Described %d image(s)", len(results))
        return results


description_service = DescriptionService()
