"""Version history and rollback routes."""
import logging

from fastapi import APIRouter, HTTPException, Request

from errors import NamespaceError
from models import FileHistoryResponse, RollbackRequest, RollbackResponse, VersionRecordResponse
from routes.deps import domain_http_error, get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rag")


@router.get("/files/{path:path}/versions", response_model=FileHistoryResponse)
async def get_versions(path: str, request: Request):
    """Current size and modification time plus retained versions, oldest first"""
    try:
        history = await get_app_state(request).get_namespace().get_history(path)
        return FileHistoryResponse(
            file_path=history.file_path,
            current_size=history.current_size,
            current_modified_at=history.current_modified_at,
            versions=[VersionRecordResponse(**record.to_dict()) for record in history.versions],
        )
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception(f"History lookup failed: {path}")
        raise HTTPException(status_code=500, detail="Failed to read version history")


@router.post("/files/{path:path}/rollback", response_model=RollbackResponse)
async def rollback(path: str, body: RollbackRequest, request: Request):
    """Restore a retained version as the live content

    The content being replaced is saved as a new version first.
    """
    try:
        result = await get_app_state(request).get_namespace().rollback(path, body.version, body.reindex)
        return RollbackResponse(
            status="rolled_back",
            rolled_back_to=result.rolled_back_to,
            reindex_triggered=result.reindex_triggered,
        )
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception(f"Rollback failed: {path} v{body.version}")
        raise HTTPException(status_code=500, detail="Failed to roll back file")
