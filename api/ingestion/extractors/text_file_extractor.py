"""
Text file extractor

Extracts text from plain text files (txt, md, source code, json, yaml, toml).
"""
from pathlib import Path

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError
from pipeline.interfaces.extractor import ExtractorInterface


class TextFileExtractor(ExtractorInterface):
    """Extracts text from plain text files"""

    FORMAT = FileFormat.PLAIN_TEXT

    def extract(self, path: Path) -> ExtractionResult:
        """Extract text from file"""
        try:
            with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                text = f.read()
        except OSError as e:
            raise ExtractionError(f"Cannot read {path.name}: {e}") from e
        return ExtractionResult(pages=[(text, None)], method='text')

    @property
    def name(self) -> str:
        return "text"
