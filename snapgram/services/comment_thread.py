from typing import List, Optional

from snapgram.schemas.comment import Comment
from snapgram.schemas.user import CurrentUser
from snapgram.services.async_comment_store import AsyncCommentStore
from snapgram.utils.logger import comment_logger


class CommentThread:
    """
    The comment list one view keeps for one post.

    The local list only changes from the result of this thread's own store
    calls: a refresh replaces it, a saved comment is appended, and a confirmed
    delete removes the entry. Other threads on the same post are not told
    about these changes and catch up when they refresh.
    """

    def __init__(self, store: AsyncCommentStore, post_id: str, viewer: CurrentUser):
        self.store = store
        self.post_id = post_id
        self.viewer = viewer
        self._comments: List[Comment] = []

    @property
    def comments(self) -> List[Comment]:
        return list(self._comments)

    async def refresh(self) -> bool:
        """Reload the list from the store. Keeps the current list if the fetch failed."""
        result = await self.store.fetch(self.post_id)
        if not result.succeeded:
            comment_logger.warning("Refresh failed, keeping local comments", context="thread", post_id=self.post_id)
            return False

        self._comments = list(result.comments)
        return True

    async def submit(self, content: str) -> Optional[Comment]:
        """Post a comment as the viewer and append it if the store saved it."""
        if not content or not content.strip():
            return None

        comment = await self.store.add(self.post_id, self.viewer.id, self.viewer.name, content)
        if comment is not None:
            self._comments.append(comment)
        return comment

    def can_delete(self, comment: Comment) -> bool:
        return comment.user_id == self.viewer.id

    async def remove(self, comment_id: str) -> bool:
        """Delete one of the viewer's comments; drop it locally only once the store confirms."""
        comment = next((c for c in self._comments if c.id == comment_id), None)
        if comment is None or not self.can_delete(comment):
            return False

        deleted = await self.store.delete(comment_id)
        if deleted:
            self._comments = [c for c in self._comments if c.id != comment_id]
        return deleted
