from collections.abc import Sequence

from app.config.settings import Settings
from app.database.exceptions import DatabaseError
from app.database.models import UploadRecord
from app.database.repositories.base import BaseUploadsRepository
from app.database.repositories.factory import UploadsRepositoryFactory
from app.logging.logger import Log
from app.ocr.factory import OcrExtractorFactory
from app.storage.base import BaseBlobStore
from app.storage.exceptions import StorageError
from app.storage.factory import BlobStoreFactory
from app.upload.models import IncomingFile
from app.upload.pipeline import PipelineContext, PipelineStep
from app.upload.rate_limiter import RateLimiter
from app.upload.steps import (
    AdmissionStep,
    ExtractTextStep,
    LoadContentStep,
    NamingStep,
    PersistRecordStep,
    StoreBlobStep,
    ValidationStep,
)
from app.upload.validator import UploadValidator


class UploadOrchestrator:
    """Runs the upload pipeline and the history/delete flows.

    Pipeline: admit -> validate -> read body -> name -> store blob -> OCR -> persist.
    Every step but OCR aborts the submission when it raises.
    """

    def __init__(
        self,
        *,
        steps: Sequence[PipelineStep],
        blob_store: BaseBlobStore,
        uploads_repo: BaseUploadsRepository,
    ) -> None:
        self._steps = list(steps)
        self._blob_store = blob_store
        self._uploads_repo = uploads_repo

    def submit(self, client_id: str, file: IncomingFile | None) -> UploadRecord:
        """Run every pipeline step in order and return the created record."""
        context = PipelineContext(client_id=client_id, file=file)
        for step in self._steps:
            try:
                context = step.run(context)
            except DatabaseError:
                if context.blob is not None:
                    Log.error(
                        f"Record insert failed; blob {context.blob.storage_path} "
                        "is left without a record"
                    )
                raise
        if context.record is None:
            raise RuntimeError("Upload pipeline finished without creating a record")
        if context.ocr_failed:
            Log.warning(f"Upload {context.record.id} saved without extracted text")
        else:
            Log.info(f"Upload {context.record.id} completed")
        return context.record

    def list(self) -> list[UploadRecord]:
        """Return all uploads, newest first."""
        return self._uploads_repo.list_all()

    def delete(self, record_id: str) -> None:
        """Remove an upload's blob (best effort) and then its row."""
        storage_path = self._uploads_repo.find_storage_path(record_id)
        if storage_path:
            try:
                self._blob_store.remove(storage_path)
            except StorageError as exc:
                Log.warning(f"Failed to delete blob {storage_path} for record {record_id}: {exc}")
        self._uploads_repo.delete(record_id)
        Log.info(f"Deleted upload record {record_id}")


def build_orchestrator(settings: Settings) -> UploadOrchestrator:
    """Build an UploadOrchestrator with all required adapters."""
    rate_limiter = RateLimiter(
        window_seconds=settings.rate_limit_window_seconds,
        max_requests=settings.rate_limit_max_requests,
    )
    validator = UploadValidator(
        allowed_mime_types=settings.upload_allowed_mime_types,
        max_file_size_bytes=settings.upload_max_file_size_bytes,
    )
    blob_store = BlobStoreFactory.create(settings)
    ocr_extractor = OcrExtractorFactory.create(settings)
    uploads_repo = UploadsRepositoryFactory.create(settings)
    steps = [
        AdmissionStep(rate_limiter),
        ValidationStep(validator),
        LoadContentStep(),
        NamingStep(),
        StoreBlobStep(blob_store),
        ExtractTextStep(ocr_extractor),
        PersistRecordStep(uploads_repo),
    ]
    return UploadOrchestrator(steps=steps, blob_store=blob_store, uploads_repo=uploads_repo)
