"""Vision-model OCR extractor."""

import base64
from pathlib import Path

from app.logging.logger import Log
from app.ocr.base import BaseOcrExtractor
from app.ocr.client_base import BaseVisionClient
from app.ocr.prompt_loader import load_system_prompt

NO_TEXT_SENTINEL = "NO_TEXT_FOUND"
NO_TEXT_MESSAGE = "No text detected in image."
USER_PROMPT = "Extract all visible text from this image."


def build_data_url(image_bytes: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class VisionOcrExtractor(BaseOcrExtractor):
    """Transcribes images by asking a vision model for a literal transcription."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        temperature: float = 0.0,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_system_prompt(system_prompt_path)

    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        raw = self._client.create_vision_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=USER_PROMPT,
            image_data_url=build_data_url(image_bytes, mime_type),
        )
        Log.debug(f"Vision raw response:\n{raw}")

        text = raw.strip()
        if not text or text == NO_TEXT_SENTINEL:
            Log.info("No text detected in image")
            return NO_TEXT_MESSAGE

        Log.info(f"OCR complete: {len(text)} chars extracted")
        return text
