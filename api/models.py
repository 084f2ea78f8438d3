from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt


class HealthResponse(BaseModel):
    status: str
    engine_available: bool
    is_indexing: bool
    upload_dir: str
    detail: Optional[str] = None


class EntryResponse(BaseModel):
    """A file or directory in the namespace"""
    name: str
    path: str
    is_dir: bool
    size: Optional[int] = None
    format: Optional[str] = Field(default=None, description="PlainText, Pdf, Docx, Xlsx, Pptx; null if unrecognised")
    modified_at: Optional[datetime] = None
    version_count: Optional[int] = None


class UploadResponse(BaseModel):
    uploaded_files: List[str]
    total_files_in_dir: int
    reindex_triggered: bool = False


class MkdirRequest(BaseModel):
    path: str = Field(..., description="Slash-separated directory path")


class CreateFileRequest(BaseModel):
    path: str = Field(..., description="Slash-separated file path")
    content: str = Field(default="", description="UTF-8 text content")
    reindex: bool = Field(default=False, description="Request a reindex after the write")


class FileOperationResponse(BaseModel):
    status: str
    path: str
    reindex_triggered: bool = False


class IndexTriggerResponse(BaseModel):
    status: str
    message: str


class IndexStatusResponse(BaseModel):
    is_indexing: bool
    last_indexed_at: Optional[datetime] = None
    total_files: int
    total_chunks: int
    failed_files: List[str] = []
    last_error: str = ""
    auto_index_interval_minutes: int
    upload_dir: str
    files_total: int = 0
    files_processed: int = 0
    current_file: Optional[str] = None
    next_run_at: Optional[datetime] = None


class ConfigUpdateRequest(BaseModel):
    # Strict so that true/"15"/15.0 are rejected rather than coerced
    auto_index_interval_minutes: StrictInt = Field(..., description="Minutes between automatic indexing runs (> 0)")


class VersionRecordResponse(BaseModel):
    version: int
    created_at: datetime
    size: int
    comment: str


class FileHistoryResponse(BaseModel):
    file_path: str
    current_size: int
    current_modified_at: datetime
    versions: List[VersionRecordResponse]


class RollbackRequest(BaseModel):
    version: StrictInt = Field(..., description="Version number to restore")
    reindex: bool = Field(default=False, description="Request a reindex after the rollback")


class RollbackResponse(BaseModel):
    status: str
    rolled_back_to: int
    reindex_triggered: bool
