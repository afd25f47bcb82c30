from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from alttext.config.locales import LOCALES


def usable_text(value: Any) -> str:
    """Return value when it is a string that encodes as UTF-8 (no lone surrogates), else ""."""
    if not isinstance(value, str):
        return ""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return value


class DescribedItem(BaseModel):
    """One image's English alt text, keyed by the uploaded filename."""

    filename: str = ""
    english_alt: str = ""


class ResultRow(BaseModel):
    """A described item plus one translation per fixed locale.

    Every locale in ``LOCALES`` is always present; anything the provider
    omitted (or returned as a non-string) becomes an empty string, and keys
    outside the fixed set are dropped.
    """

    filename: str = ""
    english_alt: str = ""
    translations: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_flat_record(cls, data: Any) -> Any:
        # Flat `{filename, english_alt, "es-ES": ...}` records are accepted too.
        if isinstance(data, dict) and "translations" not in data:
            data = {**data, "translations": {lc: data[lc] for lc in LOCALES if lc in data}}
        return data

    @field_validator("translations", mode="before")
    @classmethod
    def _fill_locales(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            value = {}
        return {lc: usable_text(value.get(lc)) for lc in LOCALES}

    def as_record(self) -> Dict[str, str]:
        """Flatten into ``{filename, english_alt, <locale>...}`` in column order."""
        return {"filename": self.filename, "english_alt": self.english_alt, **self.translations}


class DescribeResponse(BaseModel):
    results: List[DescribedItem]


class TranslateResponse(BaseModel):
    rows: List[ResultRow]
