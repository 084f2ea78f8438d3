"""
Ingestion package - turning namespace files into vector points.

- Text extraction from PlainText, PDF, DOCX, XLSX and PPTX files
- Per-file processing (extract, chunk, embed)
"""

from .extractors import ExtractionRouter
from .processing import DocumentProcessor

__all__ = [
    'ExtractionRouter',
    'DocumentProcessor',
]
