import pytest

from app.config.settings import Settings
from app.database.repositories.factory import UploadsRepositoryFactory
from app.database.repositories.in_memory_uploads_repository import InMemoryUploadsRepository
from app.database.repositories.uploads_repository import UploadsRepository
from app.storage.factory import BlobStoreFactory
from app.storage.memory_adapter import InMemoryBlobStore
from app.storage.minio_adapter import MinioBlobStore


class TestBlobStoreFactory:
    def test_creates_memory_store(self) -> None:
        store = BlobStoreFactory.create(Settings(storage_engine="memory"))
        assert isinstance(store, InMemoryBlobStore)

    def test_creates_minio_store(self) -> None:
        store = BlobStoreFactory.create(
            Settings(storage_engine="MinIO", minio_endpoint="minio:9000")
        )
        assert isinstance(store, MinioBlobStore)
        assert store.public_url("a.png") == "http://minio:9000/uploads/a.png"

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage engine 's3fs'"):
            BlobStoreFactory.create(Settings(storage_engine="s3fs"))


class TestUploadsRepositoryFactory:
    def test_creates_postgres_repository(self) -> None:
        repo = UploadsRepositoryFactory.create(Settings(record_store_engine="postgres"))
        assert isinstance(repo, UploadsRepository)

    def test_creates_memory_repository(self) -> None:
        repo = UploadsRepositoryFactory.create(Settings(record_store_engine="memory"))
        assert isinstance(repo, InMemoryUploadsRepository)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown record store engine"):
            UploadsRepositoryFactory.create(Settings(record_store_engine="sqlite"))
