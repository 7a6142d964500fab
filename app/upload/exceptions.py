class UploadError(Exception):
    """Base exception for errors raised before any external call is made."""


class UploadValidationError(UploadError):
    """Raised when an incoming file violates the upload policy."""


class RateLimitExceededError(UploadError):
    """Raised when a client exceeds its request allowance for the window."""
