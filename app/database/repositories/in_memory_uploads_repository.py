import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from app.database.exceptions import RecordNotFoundError
from app.database.models import NewUpload, UploadRecord
from app.database.repositories.base import BaseUploadsRepository


class InMemoryUploadsRepository(BaseUploadsRepository):
    """Process-local record store for development and tests.

    Rows are lost on restart. Timestamps come from the injected clock.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._rows: dict[str, UploadRecord] = {}
        self._lock = threading.Lock()

    def insert(self, new_upload: NewUpload) -> UploadRecord:
        now = self._clock()
        record = UploadRecord(
            id=str(uuid.uuid4()),
            image_url=new_upload.image_url,
            storage_path=new_upload.storage_path,
            extracted_text=new_upload.extracted_text,
            file_name=new_upload.file_name,
            file_size=new_upload.file_size,
            mime_type=new_upload.mime_type,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._rows[record.id] = record
        return record

    def list_all(self) -> list[UploadRecord]:
        with self._lock:
            rows = list(self._rows.values())
        return sorted(rows, key=lambda r: r.created_at, reverse=True)

    def find_storage_path(self, record_id: str) -> str:
        with self._lock:
            record = self._rows.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"Record {record_id} not found")
        return record.storage_path

    def delete(self, record_id: str) -> None:
        with self._lock:
            if self._rows.pop(record_id, None) is None:
                raise RecordNotFoundError(f"Record {record_id} not found")
