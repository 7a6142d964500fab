import os

from fastapi import Depends, FastAPI, File, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.api.dependencies import get_client_id, get_orchestrator
from app.api.schemas import (
    DeleteSuccessResponse,
    ErrorResponse,
    HistorySuccessResponse,
    UploadRecordOut,
    UploadSuccessResponse,
)
from app.database.exceptions import DatabaseError
from app.logging.logger import Log
from app.ocr.exceptions import OcrError
from app.storage.exceptions import StorageError
from app.upload.exceptions import RateLimitExceededError, UploadValidationError
from app.upload.models import IncomingFile
from app.upload.orchestrator import UploadOrchestrator

DELETED_MESSAGE = "Record deleted successfully."
UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."


def _json(model: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(mode="json", by_alias=True),
    )


def _error(message: str, status_code: int) -> JSONResponse:
    return _json(ErrorResponse(error=message), status_code)


def _upload_size(file: UploadFile) -> int:
    if file.size is not None:
        return file.size
    stream = file.file
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def _read_incoming(file: UploadFile | None) -> IncomingFile | None:
    if file is None:
        return None
    return IncomingFile(
        name=file.filename or "",
        size=_upload_size(file),
        content_type=file.content_type or "",
        reader=file.file.read,
    )


def create_app(orchestrator: UploadOrchestrator) -> FastAPI:
    """Build the HTTP application around a ready orchestrator."""
    app = FastAPI(title="Image Text Extractor", version="0.1.0")
    app.state.orchestrator = orchestrator

    @app.exception_handler(UploadValidationError)
    async def validation_error_handler(request: Request, exc: UploadValidationError):
        return _error(str(exc), status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_handler(request: Request, exc: RateLimitExceededError):
        Log.warning(f"Rate limit exceeded for {get_client_id(request)}")
        return _error(str(exc), status.HTTP_429_TOO_MANY_REQUESTS)

    @app.exception_handler(StorageError)
    @app.exception_handler(DatabaseError)
    @app.exception_handler(OcrError)
    async def service_error_handler(request: Request, exc: Exception):
        Log.error(f"{request.method} {request.url.path} failed: {exc}")
        return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return _error(UNEXPECTED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/upload", status_code=status.HTTP_201_CREATED)
    def upload(
        file: UploadFile | None = File(default=None),
        client_id: str = Depends(get_client_id),
        orchestrator: UploadOrchestrator = Depends(get_orchestrator),
    ) -> JSONResponse:
        record = orchestrator.submit(client_id, _read_incoming(file))
        return _json(
            UploadSuccessResponse(data=UploadRecordOut.from_record(record)),
            status.HTTP_201_CREATED,
        )

    @app.get("/history")
    def history(
        orchestrator: UploadOrchestrator = Depends(get_orchestrator),
    ) -> JSONResponse:
        records = orchestrator.list()
        return _json(
            HistorySuccessResponse(data=[UploadRecordOut.from_record(r) for r in records])
        )

    @app.delete("/upload/{record_id}")
    def delete_upload(
        record_id: str,
        orchestrator: UploadOrchestrator = Depends(get_orchestrator),
    ) -> JSONResponse:
        orchestrator.delete(record_id)
        return _json(DeleteSuccessResponse(message=DELETED_MESSAGE))

    @app.delete("/delete")
    def delete_by_query(
        record_id: str | None = Query(default=None, alias="id"),
        orchestrator: UploadOrchestrator = Depends(get_orchestrator),
    ) -> JSONResponse:
        if not record_id:
            return _error("Missing 'id' query parameter.", status.HTTP_400_BAD_REQUEST)
        orchestrator.delete(record_id)
        return _json(DeleteSuccessResponse(message=DELETED_MESSAGE))

    return app
