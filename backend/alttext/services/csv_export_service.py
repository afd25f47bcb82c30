import csv
import io
from datetime import datetime, timezone
from typing import Iterable, Optional

from alttext.config.locales import CSV_HEADERS
from alttext.schemas import ResultRow

BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def rows_to_csv(rows: Iterable[ResultRow]) -> str:
    """Serialize rows under the fixed header; fields with a comma, quote or newline get quoted."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        record = row.as_record()
        writer.writerow([record.get(h, "") for h in CSV_HEADERS])
    return buffer.getvalue()


def csv_document(rows: Iterable[ResultRow]) -> bytes:
    """UTF-8 bytes with a leading BOM so spreadsheet tools pick the right encoding."""
    return (BOM + rows_to_csv(rows)).encode("utf-8")


def export_filename(now: Optional[datetime] = None) -> str:
    """e.g. ``alt-texts-2026-10-18T09-30-12-345Z.csv``"""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    ts = now.strftime("%Y-%m-%dT%H-%M-%S") + f"-{now.microsecond // 1000:03d}Z"
    return f"alt-texts-{ts}.csv"
