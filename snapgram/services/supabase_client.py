import asyncio
from typing import Optional

from supabase import AsyncClient, acreate_client

from snapgram.core.config import settings
from snapgram.services.document_collection import SupabaseDocumentCollection
from snapgram.utils.logger import store_logger


class SupabaseClientProvider:
    """Holds the process-wide async Supabase client."""

    _client: Optional[AsyncClient] = None
    _lock: Optional[asyncio.Lock] = None

    @classmethod
    async def get_client(cls) -> AsyncClient:
        """Get the Supabase client, creating it on first use."""
        if cls._client is not None:
            return cls._client

        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise ValueError("Supabase URL and key must be configured")

        if cls._lock is None:
            cls._lock = asyncio.Lock()

        # Concurrent first callers share one client
        async with cls._lock:
            if cls._client is None:
                cls._client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
                store_logger.info("Supabase client created", url=settings.SUPABASE_URL)

        return cls._client

    @classmethod
    async def get_document_collection(cls) -> SupabaseDocumentCollection:
        return SupabaseDocumentCollection(await cls.get_client())

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client so the next call builds a new one."""
        cls._client = None
        cls._lock = None
