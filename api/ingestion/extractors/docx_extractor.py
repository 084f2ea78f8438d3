"""
DOCX file extractor

Extracts text from Microsoft Word DOCX files.
"""
import zipfile
from pathlib import Path

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError
from pipeline.interfaces.extractor import ExtractorInterface


class DOCXExtractor(ExtractorInterface):
    """Extracts text from DOCX files"""

    FORMAT = FileFormat.DOCX

    def extract(self, path: Path) -> ExtractionResult:
        """Extract text from DOCX"""
        try:
            doc = Document(str(path))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise ExtractionError(f"Cannot open DOCX {path.name}: {e}") from e
        text = self._join_paragraphs(doc)
        return ExtractionResult(pages=[(text, None)], method='docx')

    @staticmethod
    def _join_paragraphs(doc) -> str:
        """Join all paragraphs"""
        return '\n'.join([p.text for p in doc.paragraphs])

    @property
    def name(self) -> str:
        return "docx"
