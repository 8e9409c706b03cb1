"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from tapestry.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from tapestry.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from tapestry.domain.service import JWTService
from tapestry.domain.value import LifeArea

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=5000)
    section: LifeArea | None = None
    category: str | None = None
    subcategory: str | None = None
    subcategory_emoji: str | None = None
    photo_url: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    section: LifeArea | None = None,
) -> ListPostsResponse:
    """List posts newest first, optionally within one life-area.

    Args:
        list_posts_use_case: List posts use case from DI
        section: Life-area filter (query param)

    Returns:
        Posts with author names and comment counts
    """
    return await list_posts_use_case.execute(ListPostsRequest(section=section))


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create posts",
        )

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                user_id=user_id,
                content=request.content,
                section=request.section,
                category=request.category,
                subcategory=request.subcategory,
                subcategory_emoji=request.subcategory_emoji,
                photo_url=request.photo_url,
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post and its comments.

    Only the post author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete posts",
        )

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this post",
        )
