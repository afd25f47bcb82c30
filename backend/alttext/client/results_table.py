from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from alttext.config.locales import LOCALES
from alttext.schemas import ResultRow
from alttext.services.csv_export_service import csv_document, export_filename, rows_to_csv

EMPTY_MESSAGE = "No results yet. Upload images to generate alt text and translations."


class ResultTable:
    """Ordered, append-only list of result rows; cleared only as a whole."""

    def __init__(self) -> None:
        self._rows: list[ResultRow] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ResultRow]:
        return iter(self._rows)

    @property
    def rows(self) -> Tuple[ResultRow, ...]:
        return tuple(self._rows)

    def append(self, rows: Iterable[ResultRow]) -> None:
        self._rows.extend(rows)

    def clear(self) -> None:
        self._rows = []

    def to_csv(self) -> str:
        return rows_to_csv(self._rows)

    def export(self, directory: Union[str, Path] = ".", now: Optional[datetime] = None) -> Path:
        """Write the BOM-prefixed CSV to a timestamped file and return its path."""
        target = Path(directory) / export_filename(now)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(csv_document(self._rows))
        return target

    def render(self) -> str:
        if not self._rows:
            return EMPTY_MESSAGE
        width = max(len(k) for k in ("english_alt", *LOCALES))
        blocks = []
        for i, row in enumerate(self._rows, 1):
            lines = [f"[{i}] {row.filename}", f"    {'english_alt':<{width}}  {row.english_alt}"]
            lines += [f"    {lc:<{width}}  {row.translations[lc]}" for lc in LOCALES]
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
