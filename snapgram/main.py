from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from snapgram.core.config import settings
from snapgram.api.router import api_router
from snapgram.services.supabase_client import SupabaseClientProvider

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
async def startup_event():
    """Connect to the backend on application startup."""
    logger.info("Starting up Snapgram Comments API...")

    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning("Supabase is not configured; comment endpoints will answer 503")
        return

    try:
        await SupabaseClientProvider.get_client()
        logger.info("Supabase client initialized")
    except Exception as e:
        logger.error(f"Failed to start up application: {e}")
        raise

@app.on_event("shutdown")
async def shutdown_event():
    """Release the backend client on application shutdown."""
    logger.info("Shutting down Snapgram Comments API...")
    SupabaseClientProvider.reset()

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Welcome to Snapgram Comments API"}
