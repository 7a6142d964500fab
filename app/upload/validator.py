from collections.abc import Iterable

from app.upload.exceptions import UploadValidationError
from app.upload.models import IncomingFile

MISSING_FILE_MESSAGE = "No file provided. Please select an image to upload."

_TYPE_LABELS = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
    "image/webp": "WebP",
    "image/gif": "GIF",
    "image/bmp": "BMP",
}


class UploadValidator:
    """Checks an incoming file's name, size and content type against policy."""

    def __init__(self, allowed_mime_types: Iterable[str], max_file_size_bytes: int) -> None:
        self._allowed_mime_types = tuple(allowed_mime_types)
        self._max_file_size_bytes = max_file_size_bytes

    def validate(self, file: IncomingFile | None) -> None:
        """Raise UploadValidationError listing every violated rule."""
        if file is None:
            raise UploadValidationError(MISSING_FILE_MESSAGE)

        issues = []
        if not file.name:
            issues.append("File name is required")
        if file.size > self._max_file_size_bytes:
            issues.append(f"File size must be less than {self._max_size_label()}")
        if file.content_type not in self._allowed_mime_types:
            issues.append(f"Invalid file type. Allowed: {self._allowed_label()}")

        if issues:
            raise UploadValidationError(", ".join(issues))

    def _max_size_label(self) -> str:
        megabytes = self._max_file_size_bytes / 1024 / 1024
        return f"{megabytes:g}MB"

    def _allowed_label(self) -> str:
        return ", ".join(_TYPE_LABELS.get(t, t) for t in self._allowed_mime_types)
