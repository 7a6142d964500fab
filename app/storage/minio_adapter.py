from io import BytesIO

import urllib3
from minio import Minio
from minio.error import MinioException, S3Error

from app.logging.logger import Log
from app.storage.base import BaseBlobStore
from app.storage.exceptions import StorageError
from app.storage.models import StoredBlob

_MISSING_OBJECT_CODES = ("NoSuchKey", "NoSuchObject")


class MinioBlobStore(BaseBlobStore):
    """Blob store backed by MinIO or any S3-compatible service."""

    def __init__(
        self,
        *,
        endpoint: str,
        access_key: str,
        secret_key: str,
        bucket: str,
        secure: bool = False,
        public_base_url: str = "",
        timeout_seconds: float = 30.0,
        client: Minio | None = None,
    ) -> None:
        if client is None:
            http_client = urllib3.PoolManager(
                timeout=urllib3.Timeout(connect=timeout_seconds, read=timeout_seconds),
                retries=False,
            )
            client = Minio(
                endpoint=endpoint,
                access_key=access_key,
                secret_key=secret_key,
                secure=secure,
                http_client=http_client,
            )
        self._client = client
        self._bucket = bucket
        scheme = "https" if secure else "http"
        base_url = public_base_url or f"{scheme}://{endpoint}"
        self._public_base_url = base_url.rstrip("/")
        self._bucket_checked = False

    def store(self, data: bytes, name: str, content_type: str) -> StoredBlob:
        try:
            self._ensure_bucket()
            if self._exists(name):
                raise StorageError(f"Storage upload failed: object '{name}' already exists")
            self._client.put_object(
                bucket_name=self._bucket,
                object_name=name,
                data=BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except (MinioException, urllib3.exceptions.HTTPError) as exc:
            raise StorageError(f"Storage upload failed: {exc}") from exc

        Log.info(f"Stored {len(data)} bytes as {self._bucket}/{name}")
        return StoredBlob(public_url=self.public_url(name), storage_path=name)

    def remove(self, storage_path: str) -> None:
        try:
            if not self._exists(storage_path):
                raise StorageError(
                    f"Storage delete failed: object '{storage_path}' not found"
                )
            self._client.remove_object(bucket_name=self._bucket, object_name=storage_path)
        except (MinioException, urllib3.exceptions.HTTPError) as exc:
            raise StorageError(f"Storage delete failed: {exc}") from exc

    def public_url(self, storage_path: str) -> str:
        return f"{self._public_base_url}/{self._bucket}/{storage_path}"

    def _ensure_bucket(self) -> None:
        if self._bucket_checked:
            return
        if not self._client.bucket_exists(bucket_name=self._bucket):
            self._client.make_bucket(bucket_name=self._bucket)
            Log.info(f"Created bucket {self._bucket}")
        self._bucket_checked = True

    def _exists(self, name: str) -> bool:
        try:
            self._client.stat_object(bucket_name=self._bucket, object_name=name)
        except S3Error as exc:
            if exc.code in _MISSING_OBJECT_CODES:
                return False
            raise
        return True
