"""Comment routes."""

import logging
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from tapestry.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from tapestry.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from tapestry.domain.service import JWTService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comments of a post as a depth-first thread.

    Top-level comments come oldest first, each followed by its replies in
    the same order. Every item carries its depth and its direct reply ids.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment thread and total number of comments
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(post_id=str(post_id))
    )


@router.get("/{post_id}/comments/count", response_model=CountCommentsResponse)
async def count_comments(
    post_id: UUID,
    count_comments_use_case: FromDishka[CountCommentsUseCase],
) -> CountCommentsResponse:
    """Number of comments on a post, replies included."""
    return await count_comments_use_case.execute(
        CountCommentsRequest(post_id=str(post_id))
    )


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    parent_id = str(request.parent_id) if request.parent_id else None
    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                user_id=user_id,
                content=request.content,
                parent_id=parent_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - post not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        logger.info(f"Comment rejected on post {post_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Comment {result.comment_id} created on post {post_id}")
    return result


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Only the comment author can delete. Replies to it stay visible as
    top-level comments.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the comment is not on this post
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_id), comment_id=str(comment_id), user_id=user_id
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
