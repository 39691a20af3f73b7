from fastapi import APIRouter, Depends, HTTPException, Response, status

from snapgram.api.deps import get_comment_store, get_current_user
from snapgram.schemas.comment import Comment, CommentCreate, CommentListResponse
from snapgram.schemas.user import CurrentUser
from snapgram.services.async_comment_store import AsyncCommentStore
from snapgram.utils.logger import api_logger

router = APIRouter()

@router.get("/posts/{post_id}/comments", response_model=CommentListResponse)
async def list_comments(
    post_id: str,
    store: AsyncCommentStore = Depends(get_comment_store)
):
    """Get the comments of a post, oldest first."""
    result = await store.fetch(post_id)
    if not result.succeeded:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comments could not be loaded"
        )

    return CommentListResponse(
        post_id=post_id,
        comments=result.comments,
        total_count=len(result.comments)
    )

@router.post("/posts/{post_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    comment_in: CommentCreate,
    store: AsyncCommentStore = Depends(get_comment_store),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Post a comment as the current user."""
    comment = await store.add(
        post_id=post_id,
        user_id=current_user.id,
        user_name=current_user.name,
        content=comment_in.content
    )
    if comment is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Comment could not be saved"
        )

    api_logger.info("Comment posted", context="comments", post_id=post_id, user_id=current_user.id)
    return comment

@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    store: AsyncCommentStore = Depends(get_comment_store),
    current_user: CurrentUser = Depends(get_current_user)
):
    """
    Delete a comment.

    Who may delete what is decided by the backend's access rules.
    """
    deleted = await store.delete(comment_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or could not be deleted"
        )

    api_logger.info("Comment deleted", context="comments", comment_id=comment_id, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
