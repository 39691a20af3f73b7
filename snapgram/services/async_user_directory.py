from typing import Any, Dict, Optional

from snapgram.services.async_error_handler import RemoteRecordNotFoundError, absorb_remote_errors, with_timeout
from snapgram.services.document_collection import DocumentCollection
from snapgram.utils.logger import user_logger


class AsyncUserDirectory:
    """Looks up user profiles in the remote users collection."""

    def __init__(
        self,
        collection: DocumentCollection,
        users_collection: str = "users",
        timeout_seconds: Optional[float] = None,
    ):
        self.collection = collection
        self.users_collection = users_collection
        self.timeout_seconds = timeout_seconds

    @absorb_remote_errors("get_user", sentinel=None)
    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a user record, or None if the id is empty, unknown, or the lookup fails."""
        if not user_id:
            user_logger.warning("User ID is missing or invalid")
            return None

        try:
            return await with_timeout(
                self.collection.get_record(self.users_collection, user_id), self.timeout_seconds
            )
        except RemoteRecordNotFoundError:
            user_logger.warning("User not found", user_id=user_id)
            return None

    async def get_display_name(self, user_id: str) -> Optional[str]:
        """Resolve the name shown next to a user's content."""
        user = await self.get_user(user_id)
        if not user:
            return None
        return user.get("name") or user.get("username") or None
