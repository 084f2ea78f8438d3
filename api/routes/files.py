"""File and directory routes."""
import logging
from typing import List

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile

from errors import NamespaceError
from models import (
    CreateFileRequest,
    EntryResponse,
    FileOperationResponse,
    MkdirRequest,
    UploadResponse,
)
from routes.deps import domain_http_error, get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rag")


@router.post("/upload", response_model=UploadResponse)
async def upload_files(
    request: Request,
    files: List[UploadFile] = File(..., description="Files to store"),
    path: str = Query(default="", description="Target directory, created if missing"),
    reindex: bool = Query(default=False, description="Request a reindex after the upload"),
):
    """Upload one or more files into a namespace directory

    Existing files with the same name are overwritten and their previous
    content is kept as a version.
    """
    try:
        app_state = get_app_state(request)
        contents = [(f.filename, await f.read()) for f in files]
        summary = await app_state.get_namespace().upload(path, contents)
        triggered = app_state.request_reindex(f"upload:{path or '/'}") if reindex else False
        return UploadResponse(
            uploaded_files=summary.uploaded_files,
            total_files_in_dir=summary.total_files_in_dir,
            reindex_triggered=triggered,
        )
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception("Upload failed")
        raise HTTPException(status_code=500, detail="Failed to upload files")


@router.get("/files", response_model=List[EntryResponse])
async def list_files(request: Request, path: str = Query(default="", description="Directory to list")):
    """List the immediate children of a directory, directories first"""
    try:
        entries = await get_app_state(request).get_namespace().list(path)
        return [EntryResponse(**entry.to_dict()) for entry in entries]
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception("Listing failed")
        raise HTTPException(status_code=500, detail="Failed to list files")


@router.delete("/files/{path:path}", response_model=FileOperationResponse)
async def delete_file(path: str, request: Request,
                      reindex: bool = Query(default=False, description="Request a reindex after the delete")):
    """Delete a file, or a directory with all descendants

    Version history of everything removed is deleted too.
    """
    try:
        app_state = get_app_state(request)
        await app_state.get_namespace().delete(path)
        triggered = app_state.request_reindex(f"delete:{path}") if reindex else False
        return FileOperationResponse(status="deleted", path=path.strip("/"), reindex_triggered=triggered)
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception(f"Delete failed: {path}")
        raise HTTPException(status_code=500, detail="Failed to delete path")


@router.post("/mkdir", response_model=FileOperationResponse)
async def make_directory(body: MkdirRequest, request: Request):
    """Create a directory and any missing parents"""
    try:
        entry = await get_app_state(request).get_namespace().create_directory(body.path)
        return FileOperationResponse(status="created", path=entry.path)
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception(f"mkdir failed: {body.path}")
        raise HTTPException(status_code=500, detail="Failed to create directory")


@router.post("/files/create", response_model=FileOperationResponse)
async def create_file(body: CreateFileRequest, request: Request):
    """Create or overwrite a text file

    Overwrites snapshot the previous content as a new version.
    """
    try:
        app_state = get_app_state(request)
        entry = await app_state.get_namespace().create_or_update_file(body.path, body.content)
        triggered = app_state.request_reindex(f"write:{entry.path}") if body.reindex else False
        return FileOperationResponse(status="saved", path=entry.path, reindex_triggered=triggered)
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception(f"Write failed: {body.path}")
        raise HTTPException(status_code=500, detail="Failed to write file")
