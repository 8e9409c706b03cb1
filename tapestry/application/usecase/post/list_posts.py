"""List posts use case."""

from datetime import datetime

from pydantic import BaseModel

from tapestry.domain.repository import CommentRepository
from tapestry.domain.service import PostService, ProfileService, display_name
from tapestry.domain.value import LifeArea


class PostItem(BaseModel):
    """Post item in list response."""

    post_id: str
    user_id: str
    full_name: str | None
    display_name: str
    content: str
    section: LifeArea | None
    category: str | None
    category_emoji: str | None
    category_part: str | None
    subcategory: str | None
    subcategory_emoji: str | None
    photo_url: str | None
    likes: int
    comment_count: int
    created_at: datetime


class ListPostsRequest(BaseModel):
    """List posts request."""

    section: LifeArea | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase:
    """Use case for the feed of a life-area, or of everything."""

    def __init__(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service for author names
            comment_repository: Comment repository for the per-post counts
        """
        self.post_service = post_service
        self.profile_service = profile_service
        self.comment_repository = comment_repository

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Author names and comment counts are fetched in one batch each.

        Args:
            request: List posts request with optional life-area filter

        Returns:
            Posts newest first
        """
        posts = await self.post_service.list_posts(section=request.section)
        names = await self.profile_service.get_names(p.user_id for p in posts)
        counts = await self.comment_repository.count_by_posts([p.id for p in posts])

        items = [
            PostItem(
                post_id=post.id,
                user_id=post.user_id,
                full_name=names.get(post.user_id),
                display_name=display_name(post.user_id, names.get(post.user_id)),
                content=post.content,
                section=post.section,
                category=post.category,
                category_emoji=post.category_emoji,
                category_part=post.category_part,
                subcategory=post.subcategory,
                subcategory_emoji=post.subcategory_emoji,
                photo_url=post.photo_url,
                likes=post.likes,
                comment_count=counts.get(post.id, 0),
                created_at=post.created_at,
            )
            for post in posts
        ]

        return ListPostsResponse(posts=items, total=len(items))
