from app.ocr.base import BaseOcrExtractor
from app.ocr.extractor import VisionOcrExtractor
from app.ocr.factory import OcrExtractorFactory

__all__ = ["BaseOcrExtractor", "OcrExtractorFactory", "VisionOcrExtractor"]
