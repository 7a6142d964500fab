from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.database.models import UploadRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadRecordOut(_CamelModel):
    """Public shape of an upload; the storage path is never exposed."""

    id: str
    image_url: str
    extracted_text: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: UploadRecord) -> "UploadRecordOut":
        return cls(
            id=record.id,
            image_url=record.image_url,
            extracted_text=record.extracted_text,
            file_name=record.file_name,
            file_size=record.file_size,
            mime_type=record.mime_type,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class UploadSuccessResponse(_CamelModel):
    success: bool = True
    data: UploadRecordOut


class HistorySuccessResponse(_CamelModel):
    success: bool = True
    data: list[UploadRecordOut]


class DeleteSuccessResponse(_CamelModel):
    success: bool = True
    message: str


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
