"""
PDF extractor

Extracts page text with pypdfium2. Scanned PDFs without a text layer yield
empty pages; OCR is out of scope.
"""
import logging
from pathlib import Path

import pypdfium2 as pdfium

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError
from pipeline.interfaces.extractor import ExtractorInterface

logger = logging.getLogger(__name__)


class PDFExtractor(ExtractorInterface):
    """Extracts text from PDF files page by page"""

    FORMAT = FileFormat.PDF

    def extract(self, path: Path) -> ExtractionResult:
        """Extract text from each page, keeping 1-based page numbers"""
        try:
            pdf = pdfium.PdfDocument(str(path))
        except pdfium.PdfiumError as e:
            raise ExtractionError(f"Cannot open PDF {path.name}: {e}") from e

        try:
            pages = []
            for index in range(len(pdf)):
                page = pdf[index]
                textpage = page.get_textpage()
                try:
                    pages.append((textpage.get_text_range(), index + 1))
                finally:
                    textpage.close()
                    page.close()
        except pdfium.PdfiumError as e:
            raise ExtractionError(f"Cannot read PDF {path.name}: {e}") from e
        finally:
            pdf.close()

        return ExtractionResult(pages=pages, method='pypdfium2')

    @property
    def name(self) -> str:
        return "pypdfium2"
