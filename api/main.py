from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app_state import AppState
from config import default_config
from logging_config import configure_logging
from startup.manager import StartupManager
from routes.health import router as health_router
from routes.files import router as files_router
from routes.versions import router as versions_router
from routes.indexing import router as indexing_router


def create_app(config=default_config, factory=None, timer_factory=None) -> FastAPI:
    """Build the FastAPI application

    Args:
        config: Application configuration
        factory: Optional ComponentFactory override for the indexing engine
        timer_factory: Optional threading.Timer replacement for the scheduler
    """
    state = AppState()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan"""
        manager = StartupManager(state, config=config, factory=factory, timer_factory=timer_factory)
        manager.initialize()
        yield
        manager.shutdown()

    app = FastAPI(
        title="RAG Document Namespace API",
        description="Versioned document namespace with background vector indexing",
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are client errors (400), not 422"""
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    # Store state in app for route access
    app.state.app_state = state

    app.include_router(health_router)
    app.include_router(files_router)
    app.include_router(versions_router)
    app.include_router(indexing_router)
    return app


configure_logging(default_config.logging.level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
