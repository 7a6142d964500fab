from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewUpload:
    """Fields written by the record store insert."""

    image_url: str
    storage_path: str
    extracted_text: str | None
    file_name: str | None
    file_size: int | None
    mime_type: str | None


@dataclass(frozen=True)
class UploadRecord:
    """Represents a row from the uploads table."""

    id: str
    image_url: str
    storage_path: str
    extracted_text: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
