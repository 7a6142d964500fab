import uuid

from app.database.models import NewUpload
from app.database.repositories.base import BaseUploadsRepository
from app.logging.logger import Log
from app.ocr.base import BaseOcrExtractor
from app.ocr.exceptions import OcrError
from app.storage.base import BaseBlobStore
from app.upload.models import IncomingFile
from app.upload.pipeline import PipelineContext, PipelineStep
from app.upload.rate_limiter import RateLimiter
from app.upload.validator import UploadValidator

OCR_FAILED_TEXT = "Text extraction failed. Please try again."


def _require_file(context: PipelineContext) -> IncomingFile:
    if context.file is None:
        raise ValueError("PipelineContext.file must be set after validation")
    return context.file


class AdmissionStep(PipelineStep):
    def __init__(self, rate_limiter: RateLimiter) -> None:
        self._rate_limiter = rate_limiter

    def run(self, context: PipelineContext) -> PipelineContext:
        self._rate_limiter.check(context.client_id)
        return context


class ValidationStep(PipelineStep):
    def __init__(self, validator: UploadValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        self._validator.validate(context.file)
        return context


class LoadContentStep(PipelineStep):
    """Reads the request body; runs only once the request is admitted and valid."""

    def run(self, context: PipelineContext) -> PipelineContext:
        context.content = _require_file(context).read()
        return context


class NamingStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        file = _require_file(context)
        context.object_name = f"{uuid.uuid4()}.{file.extension}"
        return context


class StoreBlobStep(PipelineStep):
    def __init__(self, blob_store: BaseBlobStore) -> None:
        self._blob_store = blob_store

    def run(self, context: PipelineContext) -> PipelineContext:
        file = _require_file(context)
        context.blob = self._blob_store.store(
            context.content, context.object_name, file.content_type
        )
        Log.info(f"Uploaded {file.name} ({file.size} bytes) as {context.blob.storage_path}")
        return context


class ExtractTextStep(PipelineStep):
    """Runs OCR; a provider failure degrades the text instead of failing the upload."""

    def __init__(self, ocr_extractor: BaseOcrExtractor) -> None:
        self._ocr_extractor = ocr_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        file = _require_file(context)
        try:
            context.extracted_text = self._ocr_extractor.extract_text(
                context.content, file.content_type
            )
        except OcrError as exc:
            Log.warning(f"Text extraction failed for {context.object_name}: {exc}")
            context.extracted_text = OCR_FAILED_TEXT
            context.ocr_failed = True
        return context


class PersistRecordStep(PipelineStep):
    def __init__(self, uploads_repo: BaseUploadsRepository) -> None:
        self._uploads_repo = uploads_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        file = _require_file(context)
        if context.blob is None:
            raise ValueError("PipelineContext.blob must be set before persist")
        context.record = self._uploads_repo.insert(
            NewUpload(
                image_url=context.blob.public_url,
                storage_path=context.blob.storage_path,
                extracted_text=context.extracted_text,
                file_name=file.name,
                file_size=file.size,
                mime_type=file.content_type,
            )
        )
        Log.info(f"Saved upload record {context.record.id}")
        return context
