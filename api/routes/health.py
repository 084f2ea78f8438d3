"""Health and info routes."""
from fastapi import APIRouter, Request

from models import HealthResponse
from routes.deps import get_app_state

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information"""
    return {
        "message": "RAG Document Namespace API",
        "docs": "/docs",
        "health": "/health",
        "status": "/rag/status",
    }


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """
    Health check endpoint

    File management is always up; indexing depends on the engine.
    """
    app_state = get_app_state(request)
    available = app_state.is_engine_available()
    store = app_state.get_store()

    return HealthResponse(
        status="healthy" if available else "degraded",
        engine_available=available,
        is_indexing=app_state.is_indexing_in_progress(),
        upload_dir=str(store.root) if store else "",
        detail=None if available else app_state.engine_unavailable_message(),
    )
