"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from tapestry.domain.error import NotFoundError, ValidationError
from tapestry.domain.service import (
    CommentService,
    PostService,
    ProfileService,
    display_name,
)
from tapestry.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    user_id: str  # Account ID from authenticated user
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    user_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    full_name: str | None
    display_name: str


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            profile_service: Profile domain service for the author name
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists
        2. Trim content, reject when empty
        3. Create comment (service validates the parent when replying)

        Args:
            request: Create comment request

        Returns:
            The stored comment with its author's name

        Raises:
            NotFoundError: If post not found
            ValidationError: If content is empty
            ValueError: If the parent comment is missing or on another post
        """
        post_id = PostId(request.post_id)
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        content = request.content.strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")

        user_id = UserId(request.user_id)
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            user_id=user_id,
            content=content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )

        names = await self.profile_service.get_names([user_id])
        full_name = names.get(user_id)

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            content=comment.content,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            full_name=full_name,
            display_name=display_name(comment.user_id, full_name),
        )
