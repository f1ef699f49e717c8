"""File type specific extractors."""

from .text_extractor import TextExtractor
from .pptx_extractor import PPTXExtractor
from .pdf_extractor import PDFExtractor
from .docx_extractor import DOCXExtractor

__all__ = [
    "TextExtractor",
    "PPTXExtractor",
    "PDFExtractor",
    "DOCXExtractor",
]
