"""In-memory post repository for testing."""

from typing import Optional

from tapestry.domain.model.post import Post
from tapestry.domain.repository.post import PostRepository
from tapestry.domain.value import LifeArea, PostId

from .comment import InMemoryCommentRepository


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    When given the comment repository, deleting a post also drops its
    comments, like the foreign key cascade in PostgreSQL.
    """

    def __init__(
        self, comment_repository: InMemoryCommentRepository | None = None
    ) -> None:
        self._posts: dict[PostId, Post] = {}
        self._comment_repository = comment_repository

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, section: Optional[LifeArea] = None) -> list[Post]:
        """Find posts newest first, optionally within one life-area."""
        posts = [
            p for p in self._posts.values() if section is None or p.section == section
        ]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its comments."""
        self._posts.pop(post_id, None)
        if self._comment_repository is not None:
            await self._comment_repository.delete_by_post(post_id)
