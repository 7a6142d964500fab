from abc import ABC, abstractmethod

from app.storage.models import StoredBlob


class BaseBlobStore(ABC):
    """Contract for all blob storage adapters."""

    @abstractmethod
    def store(self, data: bytes, name: str, content_type: str) -> StoredBlob:
        """Write a new object.

        Args:
            data: Raw object content.
            name: Object name, unique within the store.
            content_type: MIME type recorded with the object.

        Returns:
            StoredBlob with the public URL and the path used for removal.

        Raises:
            StorageError: if the write is rejected, including name collisions.
        """

    @abstractmethod
    def remove(self, storage_path: str) -> None:
        """Delete an object.

        Raises:
            StorageError: if the object is missing or the store is unreachable.
        """
