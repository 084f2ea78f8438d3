"""Indexing routes module."""
import logging

from fastapi import APIRouter, HTTPException, Request

from errors import NamespaceError
from models import ConfigUpdateRequest, IndexStatusResponse, IndexTriggerResponse
from routes.deps import domain_http_error, get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rag")


@router.post("/index", response_model=IndexTriggerResponse, status_code=202)
async def trigger_index(request: Request):
    """Start a full reindex in the background

    Returns immediately. Poll /rag/status for progress, per-file failures
    and the outcome of the run.
    """
    try:
        get_app_state(request).get_coordinator().trigger()
        return IndexTriggerResponse(status="accepted", message="Indexing started. Poll /rag/status for progress.")
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception("Failed to start indexing")
        raise HTTPException(status_code=500, detail="Failed to start indexing")


@router.get("/status", response_model=IndexStatusResponse)
async def get_status(request: Request):
    """Snapshot of the indexing engine state"""
    try:
        status = get_app_state(request).get_status_publisher().get_status()
        return IndexStatusResponse(**status.to_dict())
    except NamespaceError as e:
        raise domain_http_error(e)


@router.put("/config", response_model=IndexStatusResponse)
async def update_config(body: ConfigUpdateRequest, request: Request):
    """Change the auto-index interval; the next run fires one interval from now"""
    try:
        status = get_app_state(request).get_status_publisher().update_config(body.auto_index_interval_minutes)
        return IndexStatusResponse(**status.to_dict())
    except NamespaceError as e:
        raise domain_http_error(e)
    except Exception:
        logger.exception("Config update failed")
        raise HTTPException(status_code=500, detail="Failed to update config")
