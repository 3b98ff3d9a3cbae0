"""
PROPAL Backend - FastAPI Application

Account registration, profile management and per-user speech agent
configuration stored in MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from propal.config import get_settings
from propal.core.errors import ValidationFailed
from propal.core.logging import configure_logging
from propal.database.connections import MongoConnection
from propal.database.registry import create_indexes
from propal.routers import auth, catalog, health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB handle (unless one was provided, e.g. by tests)
    - Create indexes

    Shutdown:
    - Close the MongoDB handle
    """
    configure_logging()
    logger.info("Starting up PROPAL Backend...")

    connection = getattr(app.state, "mongo", None)
    if connection is None:
        connection = MongoConnection(get_settings())
        app.state.mongo = connection

    try:
        await create_indexes(connection.get_database())
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    # Shutdown
    logger.info("Shutting down PROPAL Backend...")
    connection.close()
    app.state.mongo = None
    logger.info("Database connection closed")


def create_app(connection: MongoConnection | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        connection: Optional pre-built MongoDB handle; when omitted the
            lifespan opens one from settings.
    """
    settings = get_settings()

    app = FastAPI(
        title="PROPAL API",
        description="""
## PROPAL Account API

Registration, login, profile editing and speech agent configuration.

### Results
Every account endpoint answers with the same envelope:
```
{"success": true, "user": "...", "data": {...}, "message": "..."}
{"success": false, "error": "..."}
```
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.mongo = connection

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Render body validation errors in the uniform result shape."""
        error = ValidationFailed.from_validation_error(exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"success": False, "error": error.message},
        )

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(catalog.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "PROPAL API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
