"""
XLSX extractor

One page per worksheet. Cells are tab-separated, rows newline-separated,
and computed values are read instead of formulas.
"""
import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError
from pipeline.interfaces.extractor import ExtractorInterface


class XLSXExtractor(ExtractorInterface):
    """Extracts text from Excel workbooks"""

    FORMAT = FileFormat.XLSX

    def extract(self, path: Path) -> ExtractionResult:
        try:
            workbook = load_workbook(str(path), read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise ExtractionError(f"Cannot open XLSX {path.name}: {e}") from e

        try:
            pages = []
            for number, sheet in enumerate(workbook.worksheets, start=1):
                lines = [f"# {sheet.title}"]
                for row in sheet.iter_rows(values_only=True):
                    cells = ["" if value is None else str(value) for value in row]
                    if any(cells):
                        lines.append("\t".join(cells).rstrip("\t"))
                pages.append(("\n".join(lines), number))
        finally:
            workbook.close()

        return ExtractionResult(pages=pages, method='openpyxl')

    @property
    def name(self) -> str:
        return "openpyxl"
