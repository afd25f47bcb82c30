from pathlib import Path
from typing import Iterable, List, Optional, Union

import httpx

from alttext.client.api_client import AltTextApiClient, ApiError
from alttext.client.results_table import ResultTable
from alttext.client.validator import UploadCandidate, validate_candidates
from alttext.config.locales import LOCALES
from alttext.schemas import ResultRow
from alttext.utils.logger import get_logger

logger = get_logger(__name__)


class AltTextSession:
    """
    Holds the result table and the error list for one user session and runs
    the validate → describe → translate pipeline for each batch.
    """

    def __init__(self, api: AltTextApiClient):
        self.api = api
        self.table = ResultTable()
        self.errors: List[str] = []

    def handle_files(self, candidates: Iterable[UploadCandidate]) -> List[ResultRow]:
        """
        Process one batch. Returns the rows it added; a failed describe or
        translate call adds none and records a single error message.
        """
        validation = validate_candidates(candidates)
        self.errors.extend(validation.errors)
        if not validation.valid:
            return []

        try:
            described = self.api.describe(validation.valid)
            rows = self.api.translate(described, LOCALES)
        except (ApiError, httpx.HTTPError) as exc:
            logger.error("Batch of %d image(s) failed: %s", len(validation.valid), exc)
            self.errors.append(str(exc) or exc.__class__.__name__)
            return []

        self.table.append(rows)
        return rows

    def clear_rows(self) -> None:
        self.table.clear()

    def clear_errors(self) -> None:
        self.errors = []

    def download(self, directory: Union[str, Path] = ".") -> Optional[Path]:
        """Export the table as CSV; nothing is written while the table is empty."""
        if not len(self.table):
            return None
        return self.table.export(directory)
