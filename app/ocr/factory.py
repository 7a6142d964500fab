from typing import ClassVar

from app.config.settings import Settings
from app.ocr.base import BaseOcrExtractor
from app.ocr.example_client_adapter import ExampleVisionClientAdapter
from app.ocr.extractor import VisionOcrExtractor
from app.ocr.openai_client_adapter import OpenAIVisionClientAdapter


class OcrExtractorFactory:
    """Creates the configured OCR extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrExtractor:
        """Create a configured OCR extractor from application settings."""
        provider = settings.ocr_provider.lower()
        if provider == "example":
            return VisionOcrExtractor(client=ExampleVisionClientAdapter(), model="example")
        client = OpenAIVisionClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )
        return VisionOcrExtractor(
            client=client,
            model=cls._resolve_model_name(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.ocr_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "ocr_openai_compatible_base_url is required for "
                    "ocr_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ocr_openai_api_key,
            "openai_compatible": settings.ocr_openai_compatible_api_key,
            "groq": settings.ocr_groq_api_key,
            "openrouter": settings.ocr_openrouter_api_key,
            "together": settings.ocr_together_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ocr_openai_model_name,
            "openai_compatible": settings.ocr_openai_compatible_model_name,
            "groq": settings.ocr_groq_model_name,
            "openrouter": settings.ocr_openrouter_model_name,
            "together": settings.ocr_together_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.ocr_openai_timeout_seconds,
            "openai_compatible": settings.ocr_openai_compatible_timeout_seconds,
            "groq": settings.ocr_groq_timeout_seconds,
            "openrouter": settings.ocr_openrouter_timeout_seconds,
            "together": settings.ocr_together_timeout_seconds,
        }
        return key_map.get(provider, 60) or 60
