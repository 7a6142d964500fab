from abc import ABC, abstractmethod

from app.database.models import NewUpload, UploadRecord


class BaseUploadsRepository(ABC):
    """Contract for upload record stores."""

    @abstractmethod
    def insert(self, new_upload: NewUpload) -> UploadRecord:
        """Persist a new upload and return it with its generated id and timestamps.

        Raises:
            DatabaseError: if the store rejects the insert.
        """

    @abstractmethod
    def list_all(self) -> list[UploadRecord]:
        """Return every upload, most recently created first."""

    @abstractmethod
    def find_storage_path(self, record_id: str) -> str:
        """Return the blob locator of an upload.

        Raises:
            RecordNotFoundError: if no upload has this id.
        """

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Remove an upload row.

        Raises:
            RecordNotFoundError: if no upload has this id.
            DatabaseError: if the store fails the delete.
        """
