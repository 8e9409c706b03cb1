"""Create post use case."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from tapestry.domain.error import ValidationError
from tapestry.domain.model import Post
from tapestry.domain.service import PostService
from tapestry.domain.value import LifeArea, PostId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: str  # Account ID from authenticated user
    content: str = Field(max_length=5000)
    section: LifeArea | None = None  # None for dashboard posts
    category: str | None = None
    subcategory: str | None = Field(default=None, max_length=100)
    subcategory_emoji: str | None = Field(default=None, max_length=16)
    photo_url: str | None = None  # From a prior photo upload


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str
    user_id: str
    content: str
    section: LifeArea | None
    category: str | None
    category_emoji: str | None
    category_part: str | None
    subcategory: str | None
    subcategory_emoji: str | None
    photo_url: str | None
    created_at: datetime


class CreatePostUseCase:
    """Use case for writing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Trim content, reject when empty
        2. Resolve the category against the form's catalogue (fills the emoji)
        3. Save the post

        Args:
            request: Create post request

        Returns:
            The stored post

        Raises:
            ValidationError: If content is empty or the category is unknown
        """
        content = request.content.strip()
        if not content:
            raise ValidationError("Post content cannot be empty")

        resolved = self.post_service.resolve_category(
            request.section, request.category
        )
        category, part = resolved if resolved else (None, None)

        post = Post(
            id=PostId(str(uuid4())),
            user_id=UserId(request.user_id),
            content=content,
            section=request.section,
            category=category.name if category else None,
            category_emoji=category.emoji if category else None,
            category_part=part,
            subcategory=(request.subcategory or "").strip() or None,
            subcategory_emoji=request.subcategory_emoji or None,
            photo_url=request.photo_url,
            created_at=datetime.now(timezone.utc),
        )
        saved = await self.post_service.save_post(post)

        return CreatePostResponse(
            post_id=saved.id,
            user_id=saved.user_id,
            content=saved.content,
            section=saved.section,
            category=saved.category,
            category_emoji=saved.category_emoji,
            category_part=saved.category_part,
            subcategory=saved.subcategory,
            subcategory_emoji=saved.subcategory_emoji,
            photo_url=saved.photo_url,
            created_at=saved.created_at,
        )
