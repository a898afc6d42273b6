"""FastAPI application entry point"""
import logging
from contextlib import asynccontextmanager
from typing import Optional, Tuple

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.infrastructure.config.settings import Settings, settings
from todo_api.infrastructure.logging_setup import setup_logging
from todo_api.presentation.api.v1.errors import request_validation_error_handler
from todo_api.presentation.api.v1.routers import labels, todos

logger = logging.getLogger(__name__)


def build_repositories(
    app_settings: Settings,
) -> Tuple[TodoRepository, LabelRepository, Optional[Engine]]:
    """Create the repositories selected by ``REPOSITORY_TYPE``

    The engine is returned for the database variant so the application can
    create tables on startup and release the pool on shutdown.
    """
    if app_settings.REPOSITORY_TYPE == "memory":
        from todo_api.infrastructure.repositories.label_repository_memory import LabelRepositoryMemory
        from todo_api.infrastructure.repositories.todo_repository_memory import TodoRepositoryMemory

        logger.info("Using in-memory repositories")
        return TodoRepositoryMemory(), LabelRepositoryMemory(), None

    if app_settings.REPOSITORY_TYPE == "database":
        from todo_api.infrastructure.database.base import create_engine_from_settings, create_session_factory
        from todo_api.infrastructure.repositories.label_repository_db import LabelRepositoryDB
        from todo_api.infrastructure.repositories.todo_repository_db import TodoRepositoryDB

        engine = create_engine_from_settings(app_settings)
        session_factory = create_session_factory(engine)
        logger.info("Using database repositories")
        return TodoRepositoryDB(session_factory), LabelRepositoryDB(session_factory), engine

    raise ValueError(f"Unsupported repository type: {app_settings.REPOSITORY_TYPE}")


def create_app(
    todo_repository: TodoRepository,
    label_repository: LabelRepository,
    app_settings: Settings = settings,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """Create FastAPI app around explicitly provided repositories"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        logger.info("Starting %s %s", app_settings.APP_NAME, app_settings.APP_VERSION)
        if engine is not None:
            from todo_api.infrastructure.database.base import init_db
            init_db(engine)
        try:
            yield
        finally:
            if engine is not None:
                engine.dispose()
            logger.info("Shutting down application")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.todo_repository = todo_repository
    app.state.label_repository = label_repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include routers
    app.include_router(todos.router, prefix=app_settings.API_PREFIX)
    app.include_router(labels.router, prefix=app_settings.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": f"Welcome to {app_settings.APP_NAME}",
            "version": app_settings.APP_VERSION,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    return app


def create_app_from_settings(app_settings: Settings = settings) -> FastAPI:
    """Configure logging and build the app with the configured repositories"""
    setup_logging("DEBUG" if app_settings.DEBUG else app_settings.LOG_LEVEL)
    todo_repository, label_repository, engine = build_repositories(app_settings)
    return create_app(todo_repository, label_repository, app_settings=app_settings, engine=engine)


app = create_app_from_settings()


def run() -> None:
    """Serve the application with uvicorn"""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
