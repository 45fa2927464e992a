"""
Health check endpoint for monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter
from string_suggestion.schemas.suggestion import HealthResponse
from string_suggestion.services.suggestion import get_suggestion_service
from string_suggestion.utils.logger import get_logger

logger = get_logger("health")
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check application and word-list status",
    responses={
        200: {"description": "Service is running"},
    }
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    The suggestion endpoint works without a word list, so a missing word
    list is reported but does not make the service unhealthy.

    Returns:
        HealthResponse with status, word-list state and timestamp
    """
    service = get_suggestion_service()

    if service is not None and service.is_loaded():
        logger.debug("Health check: word list loaded")
        dictionary = "loaded"
        vocabulary_size = service.vocabulary_size()
    else:
        logger.debug("Health check: no word list loaded")
        dictionary = "not_loaded"
        vocabulary_size = 0

    return HealthResponse(
        status="healthy",
        dictionary=dictionary,
        vocabulary_size=vocabulary_size,
        timestamp=datetime.now(timezone.utc)
    )
