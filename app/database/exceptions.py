class DatabaseError(Exception):
    """Raised when the record store rejects or fails an operation."""


class RecordNotFoundError(DatabaseError):
    """Raised when no upload record matches the requested id."""
