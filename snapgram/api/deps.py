"""
API dependency injection module.

This module provides dependency injection functions for API endpoints,
including the remote document store, the comment store, and the acting user.
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from snapgram.core.config import settings
from snapgram.schemas.user import CurrentUser
from snapgram.services.async_comment_store import AsyncCommentStore
from snapgram.services.async_user_directory import AsyncUserDirectory
from snapgram.services.document_collection import DocumentCollection, SupabaseDocumentCollection
from snapgram.services.supabase_client import SupabaseClientProvider

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_document_collection() -> DocumentCollection:
    """
    Get the remote document collection.

    Raises:
        HTTPException: If the backend is not configured
    """
    try:
        return await SupabaseClientProvider.get_document_collection()
    except ValueError as e:
        logger.error(f"Document store unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment backend is not configured"
        )


def get_user_directory(
    collection: DocumentCollection = Depends(get_document_collection)
) -> AsyncUserDirectory:
    return AsyncUserDirectory(
        collection,
        users_collection=settings.USERS_COLLECTION,
        timeout_seconds=settings.REMOTE_CALL_TIMEOUT_SECONDS,
    )


def get_comment_store(
    collection: DocumentCollection = Depends(get_document_collection),
    user_directory: AsyncUserDirectory = Depends(get_user_directory),
) -> AsyncCommentStore:
    return AsyncCommentStore(
        collection,
        user_directory,
        comments_collection=settings.COMMENTS_COLLECTION,
        fallback_user_name=settings.FALLBACK_USER_NAME,
        timeout_seconds=settings.REMOTE_CALL_TIMEOUT_SECONDS,
        lookup_concurrency=settings.NAME_LOOKUP_CONCURRENCY,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:
    """
    Get the acting user from the bearer token, as validated by the backend auth service.

    Raises:
        HTTPException: If the token is missing or rejected
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    try:
        client = await SupabaseClientProvider.get_client()
    except ValueError as e:
        logger.error(f"Auth backend unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment backend is not configured"
        )

    try:
        response = await client.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.error(f"Authentication error: {e}")
        raise unauthorized

    user = response.user if response else None
    if user is None:
        raise unauthorized

    name = (user.user_metadata or {}).get("name")
    if not name:
        user_directory = AsyncUserDirectory(
            SupabaseDocumentCollection(client),
            users_collection=settings.USERS_COLLECTION,
            timeout_seconds=settings.REMOTE_CALL_TIMEOUT_SECONDS,
        )
        name = await user_directory.get_display_name(str(user.id)) or settings.FALLBACK_USER_NAME

    return CurrentUser(id=str(user.id), name=name)
