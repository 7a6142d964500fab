import threading

from app.storage.base import BaseBlobStore
from app.storage.exceptions import StorageError
from app.storage.models import StoredBlob


class InMemoryBlobStore(BaseBlobStore):
    """Blob store kept in process memory.

    No network calls. Objects are lost on restart.
    """

    def __init__(self, public_base_url: str = "memory://uploads") -> None:
        self._public_base_url = public_base_url.rstrip("/")
        self._objects: dict[str, tuple[bytes, str]] = {}
        self._lock = threading.Lock()

    def store(self, data: bytes, name: str, content_type: str) -> StoredBlob:
        with self._lock:
            if name in self._objects:
                raise StorageError(f"Storage upload failed: object '{name}' already exists")
            self._objects[name] = (data, content_type)
        return StoredBlob(public_url=f"{self._public_base_url}/{name}", storage_path=name)

    def remove(self, storage_path: str) -> None:
        with self._lock:
            if self._objects.pop(storage_path, None) is None:
                raise StorageError(
                    f"Storage delete failed: object '{storage_path}' not found"
                )

    def __contains__(self, storage_path: str) -> bool:
        with self._lock:
            return storage_path in self._objects
