"""
Main FastAPI application for the string suggestion service.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from string_suggestion.config import settings
from string_suggestion.routes import health, suggestion
from string_suggestion.middleware.logging import RequestLoggingMiddleware
from string_suggestion.services.suggestion import (
    initialize_suggestion_service,
    reset_suggestion_service,
)
from string_suggestion.utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting string suggestion service")
    logger.info(f"Environment: {'DEBUG' if settings.DEBUG else 'PRODUCTION'}")
    logger.info(f"Log level: {settings.LOG_LEVEL}")

    # Load the word list for /spellcheck (optional - graceful degradation)
    if settings.SUGGESTION_ENABLED:
        if initialize_suggestion_service():
            logger.info("Word-list suggestion service initialized")
        else:
            logger.warning("Word-list suggestion service failed to initialize (spell-check disabled)")
    else:
        logger.info("Word-list suggestion service disabled via configuration")

    yield

    # Shutdown
    logger.info("Shutting down string suggestion service")
    reset_suggestion_service()


# Create FastAPI application
app = FastAPI(
    title="String Suggestion Service",
    description="Single-word spelling correction over caller-supplied or word-list vocabularies",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(
    suggestion.router,
    prefix="/api/v1",
    tags=["Suggestion"]
)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with links to docs and health."""
    return {
        "message": "String Suggestion Service",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "string_suggestion.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
