"""Layer 1: Raw artifact text extraction."""

from .base_extractor import BaseExtractor
from .extractor_factory import ExtractorFactory

__all__ = [
    "BaseExtractor",
    "ExtractorFactory",
]
