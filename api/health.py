from fastapi import APIRouter
from api.models import HealthResponse
from apidocs import registry
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    Reports unhealthy when the docs have no OpenAPI document to serve.
    """
    documents = registry.names()
    if not documents:
        logger.warning("Health check: no OpenAPI document registered")
        return {"status": "unhealthy", "documents": documents}
    return {"status": "healthy", "documents": documents}
