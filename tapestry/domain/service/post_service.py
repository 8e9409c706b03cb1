"""Post domain service."""

import logfire

from tapestry.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from tapestry.domain.model.post import Post
from tapestry.domain.repository import PostRepository
from tapestry.domain.value import (
    Category,
    LifeArea,
    PostId,
    UserId,
    find_general_category,
)

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=post.id, section=post.section
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=saved.id)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def list_posts(self, section: LifeArea | None = None) -> list[Post]:
        """List posts, newest first.

        Args:
            section: Only posts filed under this life-area (None for all)

        Returns:
            Posts sorted by created_at descending
        """
        with logfire.span("post_service.list_posts", section=section):
            posts = await self.post_repository.find_all(section=section)
            logfire.info("Posts listed", section=section, count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post written by ``user_id`` along with its comments.

        Args:
            post_id: Post ID
            user_id: Account asking for the delete

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the post belongs to someone else
        """
        with logfire.span("post_service.delete_post", post_id=post_id, user_id=user_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found for delete", post_id=post_id)
                raise NotFoundError("Post", post_id)
            if post.user_id != user_id:
                logfire.warn(
                    "Post delete rejected, not the author",
                    post_id=post_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError("post", post_id, user_id)

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)

    @staticmethod
    def resolve_category(
        section: LifeArea | None, category: str | None
    ) -> tuple[Category, str | None] | None:
        """Resolve a category name against the catalogue of the form it came from.

        Posts filed under a life-area pick from that area's catalogue. Posts
        from the dashboard (no life-area) pick from the general categories,
        which also name the plant part they belong to.

        Args:
            section: Life-area of the post, None for dashboard posts
            category: Category name as submitted, None for no category

        Returns:
            (category, plant part) or None when no category was submitted

        Raises:
            ValidationError: If the category is not offered by that form
        """
        if not category or not category.strip():
            return None

        if section is not None:
            found = section.find_category(category)
            if found:
                return found, section.label
            if not section.categories:
                # Free-form areas: keep the name, use the area emoji
                return (
                    Category(
                        name=category.strip(),
                        emoji=section.emoji,
                        description="",
                    ),
                    section.label,
                )
            raise ValidationError(
                f"Unknown category '{category}' for life area '{section.value}'"
            )

        general = find_general_category(category)
        if general:
            found, part = general
            return found, part or None
        raise ValidationError(f"Unknown category '{category}'")
