"""API router configuration.

This module configures the main API router and includes all endpoint routers.
"""

from fastapi import APIRouter

from snapgram.api.endpoints import comments, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(comments.router, tags=["comments"])
