"""Extractor interface for document text extraction.

Defines the contract for all document extractors (PDF, DOCX, XLSX, ...).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from domain_models import ExtractionResult, FileFormat


class ExtractorInterface(ABC):
    """Interface for document text extractors.

    Contract (Liskov Substitution):
        - extract() must return ExtractionResult
        - Parse failures raise ExtractionError; the coordinator records
          them as per-file failures and moves on
    """

    FORMAT: ClassVar[FileFormat]

    @abstractmethod
    def extract(self, path: Path) -> ExtractionResult:
        """Extract text content from a document.

        Args:
            path: Path to the document file

        Returns:
            ExtractionResult with pages and method
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this extractor."""
        pass
