"""Format-specific text extractors and the router that picks between them."""

from .docx_extractor import DOCXExtractor
from .extraction_router import ExtractionRouter, default_extractors
from .pdf_extractor import PDFExtractor
from .pptx_extractor import PPTXExtractor
from .text_file_extractor import TextFileExtractor
from .xlsx_extractor import XLSXExtractor

__all__ = [
    'DOCXExtractor',
    'ExtractionRouter',
    'PDFExtractor',
    'PPTXExtractor',
    'TextFileExtractor',
    'XLSXExtractor',
    'default_extractors',
]
