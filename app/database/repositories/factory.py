from app.config.settings import Settings
from app.database.repositories.base import BaseUploadsRepository
from app.database.repositories.in_memory_uploads_repository import InMemoryUploadsRepository
from app.database.repositories.uploads_repository import UploadsRepository


class UploadsRepositoryFactory:
    """Creates the record store selected in settings."""

    ENGINES: dict[str, type[BaseUploadsRepository]] = {
        "postgres": UploadsRepository,
        "memory": InMemoryUploadsRepository,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseUploadsRepository:
        engine = settings.record_store_engine.lower()
        repo_cls = cls.ENGINES.get(engine)
        if repo_cls is None:
            raise ValueError(
                f"Unknown record store engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return repo_cls()
