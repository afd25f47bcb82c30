"""Client-side checks run before any image leaves the machine."""
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, Iterable, List, Union

from alttext.config.locales import MAX_SIZE_BYTES, SUPPORTED_MEDIA_TYPES

# mimetypes does not know .webp on every platform
_EXTENSION_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}


@dataclass
class UploadCandidate:
    """A raw file plus its declared media type and byte size."""

    filename: str
    media_type: str
    size: int
    data: bytes = b""

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "UploadCandidate":
        path = Path(path)
        data = path.read_bytes()
        return cls(filename=path.name, media_type=guess_media_type(path), size=len(data), data=data)


@dataclass
class ValidationResult:
    valid: List[UploadCandidate] = field(default_factory=list)
    rejected: List[UploadCandidate] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def guess_media_type(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or "application/octet-stream"


def validate_candidates(
    candidates: Iterable[UploadCandidate],
    allowed_types: Collection[str] = SUPPORTED_MEDIA_TYPES,
    max_bytes: int = MAX_SIZE_BYTES,
) -> ValidationResult:
    """
    Partition candidates into valid and rejected.

    Type is checked before size, so a file that fails both only reports the
    type problem. A rejection never affects the other files in the batch.
    """
    result = ValidationResult()
    limit_mb = max_bytes // (1024 * 1024)
    for candidate in candidates:
        if candidate.media_type not in allowed_types:
            result.errors.append(
                f"{candidate.filename} is not a supported image format (.jpg, .jpeg, .png, .webp)."
            )
            result.rejected.append(candidate)
        elif candidate.size > max_bytes:
            result.errors.append(
                f"{candidate.filename} exceeds {limit_mb} MB. Please upload images up to {limit_mb} MB."
            )
            result.rejected.append(candidate)
        else:
            result.valid.append(candidate)
    return result
