"""
Extraction router.

Routes extraction requests to the extractor registered for the file's
format. Formats are decided by extension (see FileFormat).
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError, UnsupportedFormatError
from pipeline.interfaces.extractor import ExtractorInterface

from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor
from .pptx_extractor import PPTXExtractor
from .text_file_extractor import TextFileExtractor
from .xlsx_extractor import XLSXExtractor

logger = logging.getLogger(__name__)


def default_extractors() -> list:
    return [TextFileExtractor(), PDFExtractor(), DOCXExtractor(), XLSXExtractor(), PPTXExtractor()]


class ExtractionRouter:
    """Routes extraction requests to specialized extractors based on file format."""

    def __init__(self, extractors: Optional[Iterable[ExtractorInterface]] = None):
        self._extractors: Dict[FileFormat, ExtractorInterface] = {
            extractor.FORMAT: extractor
            for extractor in (extractors if extractors is not None else default_extractors())
        }

    def extract(self, file_path: Path, file_format: Optional[FileFormat] = None) -> ExtractionResult:
        """Extract text from file_path.

        Raises:
            UnsupportedFormatError: No extractor handles the file's format
            ExtractionError: The extractor could not parse the file
        """
        file_format = file_format or FileFormat.from_path(file_path.name)
        extractor = self._extractors.get(file_format) if file_format else None
        if extractor is None:
            raise UnsupportedFormatError(f"Unsupported format: {file_path.suffix or file_path.name}")

        try:
            return extractor.extract(file_path)
        except ExtractionError:
            raise
        except Exception as e:
            # Third-party parsers raise assorted exception types on corrupt input
            logger.debug(f"{extractor.name} failed on {file_path}", exc_info=True)
            raise ExtractionError(f"{extractor.name} failed on {file_path.name}: {e}") from e

    def supported_formats(self) -> list:
        return sorted(f.value for f in self._extractors)
