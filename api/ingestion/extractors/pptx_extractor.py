"""
PPTX extractor

One page per slide: text frames in shape order followed by table cells.
"""
import zipfile
from pathlib import Path

from pptx import Presentation
from pptx.exc import PackageNotFoundError

from domain_models import ExtractionResult, FileFormat
from errors import ExtractionError
from pipeline.interfaces.extractor import ExtractorInterface


class PPTXExtractor(ExtractorInterface):
    """Extracts text from PowerPoint presentations"""

    FORMAT = FileFormat.PPTX

    def extract(self, path: Path) -> ExtractionResult:
        try:
            presentation = Presentation(str(path))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise ExtractionError(f"Cannot open PPTX {path.name}: {e}") from e

        pages = []
        for number, slide in enumerate(presentation.slides, start=1):
            parts = []
            for shape in slide.shapes:
                if shape.has_text_frame:
                    text = shape.text_frame.text.strip()
                    if text:
                        parts.append(text)
                if getattr(shape, "has_table", False) and shape.has_table:
                    for row in shape.table.rows:
                        cells = [cell.text.strip() for cell in row.cells]
                        if any(cells):
                            parts.append(" | ".join(cells))
            pages.append(("\n".join(parts), number))

        return ExtractionResult(pages=pages, method='python-pptx')

    @property
    def name(self) -> str:
        return "python-pptx"
