"""Fixed locale set and upload limits shared by the relay and the client."""

# Order matters: it is the column order of the results table and the CSV export.
LOCALE_LABELS: dict[str, str] = {
    "es-ES": "Spanish (Spain)",
    "it-IT": "Italian (Italy)",
    "nl-NL": "Dutch (Netherlands)",
    "nl-BE": "Dutch (Belgium)",
    "fr-FR": "French (France)",
    "de-DE": "German (Germany)",
    "de-AT": "German (Austria)",
}

LOCALES: tuple[str, ...] = tuple(LOCALE_LABELS)

SUPPORTED_MEDIA_TYPES: frozenset[str] = frozenset({
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/webp",
})

MAX_SIZE_BYTES = 5 * 1024 * 1024  # 5 MB

CSV_HEADERS: tuple[str, ...] = ("filename", "english_alt", *LOCALES)
