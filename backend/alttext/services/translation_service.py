import json
from typing import Dict, List, Optional, Sequence

from openai import AsyncOpenAI

from alttext.config.locales import LOCALES
from alttext.config.settings import settings
from alttext.prompts.alt_text_prompts import TRANSLATE_SYSTEM_PROMPT
from alttext.schemas import DescribedItem, ResultRow, usable_text
from alttext.services.openai_client import get_openai_client
from alttext.utils.logger import get_logger

logger = get_logger(__name__)


def parse_translations(content: Optional[str], locales: Sequence[str]) -> Dict[str, str]:
    """
    Pull one string per requested locale out of the model's JSON reply.

    Anything unusable (unparseable JSON, a non-object, a missing key, a
    non-string, empty or non-UTF-8 value) becomes "" instead of failing the item.
    """
    try:
        parsed = json.loads(content or "{}")
    except (ValueError, RecursionError):
        logger.warning("Translation reply was not valid JSON: %r", (content or "")[:200])
        parsed = {}
    if not isinstance(parsed, dict):
        logger.warning("Translation reply was not a JSON object: %r", parsed)
        parsed = {}

    out: Dict[str, str] = {}
    for lc in locales:
        out[lc] = usable_text(parsed.get(lc))
    missing = [lc for lc in locales if not out[lc]]
    if missing:
        logger.warning("Translation reply missing locales %s", missing)
    return out


class TranslationService:
    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        return self._client or get_openai_client()

    async def translate_item(self, item: DescribedItem, locales: Sequence[str]) -> ResultRow:
        # Only the fixed locale set is ever requested or returned.
        wanted = [lc for lc in locales if lc in LOCALES]
        ignored = [lc for lc in locales if lc not in LOCALES]
        if ignored:
            logger.warning("Ignoring unsupported locales %s", ignored)

        logger.info("Translating %s into %d locale(s)", item.filename, len(wanted))
        response = await self.client.chat.completions.create(
            model=settings.translate_model,
            messages=[
                {"role": "system", "content": TRANSLATE_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "text",
                            "text": json.dumps({"text": item.english_alt, "locales": wanted}, ensure_ascii=False),
                        }
                    ],
                },
            ],
            temperature=settings.temperature,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content if response.choices else None
        return ResultRow(
            filename=item.filename,
            english_alt=item.english_alt,
            translations=parse_translations(content, wanted),
        )

    async def translate_items(self, items: List[DescribedItem], locales: Sequence[str]) -> List[ResultRow]:
        """One provider call per item, issued one after another."""
        rows = [await self.translate_item(item, locales) for item in items]
        logger.info("Translated %d item(s)", len(rows))
        return rows


translation_service = TranslationService()
