"""
Async comment store.

Mediates between the comment lists held by callers and the remote comments
collection. Every operation absorbs backend failures and reports them with a
sentinel value (``None``, an empty list, ``False``) instead of raising, so a
caller only ever updates its local list from a successful result.
"""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from snapgram.schemas.comment import Comment, CommentFetchResult
from snapgram.services.async_error_handler import absorb_remote_errors, with_timeout
from snapgram.services.async_user_directory import AsyncUserDirectory
from snapgram.services.document_collection import DocumentCollection
from snapgram.utils.logger import comment_logger


def utc_timestamp() -> str:
    """Current time as an ISO-8601 string with an explicit UTC offset."""
    return datetime.now(timezone.utc).isoformat()


class AsyncCommentStore:
    """Add, list and delete the comments of a post in the remote store."""

    def __init__(
        self,
        collection: DocumentCollection,
        user_directory: AsyncUserDirectory,
        comments_collection: str = "comments",
        fallback_user_name: str = "Unknown User",
        timeout_seconds: Optional[float] = None,
        lookup_concurrency: int = 10,
    ):
        if lookup_concurrency < 1:
            raise ValueError("lookup_concurrency must be at least 1")

        self.collection = collection
        self.user_directory = user_directory
        self.comments_collection = comments_collection
        self.fallback_user_name = fallback_user_name
        self.timeout_seconds = timeout_seconds
        self.lookup_concurrency = lookup_concurrency

    @absorb_remote_errors("fetch comments", sentinel=CommentFetchResult(succeeded=False))
    async def fetch(self, post_id: str) -> CommentFetchResult:
        """
        Get the comments of a post, oldest first, with author names resolved.

        Returns a result whose ``succeeded`` flag is False when the remote
        query failed, so callers can tell that apart from a post with no
        comments. A failed name lookup only affects its own comment, which
        gets the fallback name.
        """
        records = await with_timeout(
            self.collection.query_records(
                self.comments_collection,
                {"post_id": post_id},
                order_by="created_at",
                ascending=True,
            ),
            self.timeout_seconds,
        )
        comments = await self._attach_user_names(records)

        comment_logger.debug("Fetched comments", context="fetch", post_id=post_id, count=len(comments))
        return CommentFetchResult(succeeded=True, comments=comments)

    async def list(self, post_id: str) -> List[Comment]:
        """Get the comments of a post, oldest first. Empty if the fetch failed."""
        result = await self.fetch(post_id)
        return result.comments

    @absorb_remote_errors("add comment", sentinel=None)
    async def add(self, post_id: str, user_id: str, user_name: str, content: str) -> Optional[Comment]:
        """
        Persist a new comment and return it, or None if it was not saved.

        Content is stored as given; rejecting blank text is up to the caller.
        The returned ``user_name`` is the one passed in, since records only
        keep the author's id.
        """
        comment_id = uuid.uuid4().hex
        fields = {
            "post_id": post_id,
            "user_id": user_id,
            "content": content,
            "created_at": utc_timestamp(),
        }

        record = await with_timeout(
            self.collection.create_record(self.comments_collection, comment_id, fields),
            self.timeout_seconds,
        )

        comment = self._to_comment({**fields, "id": comment_id, **record}, user_name)
        comment_logger.success("Comment added", context="add", post_id=post_id, comment_id=comment.id)
        return comment

    @absorb_remote_errors("delete comment", sentinel=False)
    async def delete(self, comment_id: str) -> bool:
        """
        Remove a comment. Returns False if nothing was deleted.

        No ownership check happens here; only the author's surface should
        offer the action.
        """
        await with_timeout(
            self.collection.delete_record(self.comments_collection, comment_id),
            self.timeout_seconds,
        )
        comment_logger.success("Comment deleted", context="delete", comment_id=comment_id)
        return True

    async def _attach_user_names(self, records: List[Dict[str, Any]]) -> List[Comment]:
        # One lookup per comment, at most lookup_concurrency in flight; gather keeps query order
        semaphore = asyncio.Semaphore(self.lookup_concurrency)

        async def resolve(record: Dict[str, Any]) -> Comment:
            async with semaphore:
                user_name = await self.user_directory.get_display_name(record.get("user_id"))
            if not user_name:
                comment_logger.warning(
                    "Author name unresolved, using fallback", context="fetch",
                    comment_id=record.get("id"), user_id=record.get("user_id")
                )
                user_name = self.fallback_user_name
            return self._to_comment(record, user_name)

        return await asyncio.gather(*(resolve(record) for record in records))

    @staticmethod
    def _to_comment(record: Dict[str, Any], user_name: str) -> Comment:
        created_at = record["created_at"]
        if isinstance(created_at, datetime):
            created_at = created_at.isoformat()

        return Comment(
            id=str(record["id"]),
            post_id=str(record["post_id"]),
            user_id=str(record["user_id"]),
            user_name=user_name,
            content=record["content"],
            created_at=created_at,
        )
