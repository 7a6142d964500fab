"""Offline vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in OcrExtractorFactory.
"""

from typing import ClassVar

from app.ocr.client_base import BaseVisionClient


class ExampleVisionClientAdapter(BaseVisionClient):
    """Returns a fixed transcription without any network call."""

    DEFAULT_RESPONSE: ClassVar[str] = "Example extracted text"

    def __init__(self, response: str | None = None) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response

    def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_data_url: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, image_data_url
        return self._response
