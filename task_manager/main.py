"""Main FastAPI application for the Task Manager API."""
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_manager import __version__
from task_manager.config import Settings
from task_manager.db.config import create_db_engine
from task_manager.db.init import init_db
from task_manager.errors import AuthenticationError, TaskManagerError, ValidationError
from task_manager.middleware.cors import add_cors_middleware
from task_manager.routers import auth_router, tasks_router
from task_manager.services.token_service import TokenService
from task_manager.utils.logger import configure_logging, get_logger

logger = get_logger("task_manager.app")


def add_exception_handlers(app: FastAPI):
    """Translate the error taxonomy into HTTP responses, in one place."""

    @app.exception_handler(TaskManagerError)
    async def task_manager_error_handler(request: Request, exc: TaskManagerError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = [
            ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            for error in exc.errors()
        ]
        error = ValidationError(fields=[f for f in fields if f])
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error_type=type(exc).__name__,
        )
        return JSONResponse(status_code=500, content={"error": "An error occurred."})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Process configuration; read from the environment when omitted

    Returns:
        Configured FastAPI application

    Raises:
        ConfigError: If required configuration such as AUTH_SECRET is missing
    """
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create database tables on startup, release connections on shutdown."""
        init_db(app.state.engine)
        logger.info("Application startup complete", environment=settings.environment)
        yield
        app.state.engine.dispose()

    app = FastAPI(
        title="Task Manager API",
        description="REST API for personal task lists behind bearer-token sessions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url)
    app.state.token_service = TokenService(
        settings.auth_secret,
        ttl=timedelta(seconds=settings.token_ttl_seconds),
    )

    add_cors_middleware(app, settings)
    add_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    app.include_router(auth_router)  # /register, /login
    app.include_router(tasks_router)  # /tasks

    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(
        "task_manager.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
    )
