class OcrError(Exception):
    """Raised when text extraction fails."""


class OcrNetworkError(OcrError):
    """Raised when the vision provider call fails due to network/infrastructure issues."""
