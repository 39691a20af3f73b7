from fastapi import APIRouter

from snapgram.core.config import settings

router = APIRouter()

@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "snapgram-comments",
        "environment": settings.ENVIRONMENT
    }
