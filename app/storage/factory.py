from app.config.settings import Settings
from app.storage.base import BaseBlobStore
from app.storage.memory_adapter import InMemoryBlobStore
from app.storage.minio_adapter import MinioBlobStore


class BlobStoreFactory:
    """Creates the blob store engine selected in settings."""

    ENGINES = ("minio", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        engine = settings.storage_engine.lower()
        if engine == "memory":
            return InMemoryBlobStore()
        if engine == "minio":
            return MinioBlobStore(
                endpoint=settings.minio_endpoint,
                access_key=settings.minio_access_key,
                secret_key=settings.minio_secret_key,
                bucket=settings.minio_bucket,
                secure=settings.minio_secure,
                public_base_url=settings.minio_public_base_url,
                timeout_seconds=settings.storage_timeout_seconds,
            )
        raise ValueError(
            f"Unknown storage engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
