from abc import ABC, abstractmethod


class BaseOcrExtractor(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        """Transcribe the text visible in an image.

        Args:
            image_bytes: Raw image file content.
            mime_type: Content type of the image, e.g. "image/png".

        Returns:
            The transcribed text, or a fixed user-facing message when the
            image contains no readable text.

        Raises:
            OcrError: on any provider or transport failure.
        """
