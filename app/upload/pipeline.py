from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.database.models import UploadRecord
from app.storage.models import StoredBlob
from app.upload.models import IncomingFile


@dataclass(slots=True)
class PipelineContext:
    client_id: str
    file: IncomingFile | None
    content: bytes = b""
    object_name: str = ""
    blob: StoredBlob | None = None
    extracted_text: str | None = None
    ocr_failed: bool = False
    record: UploadRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
