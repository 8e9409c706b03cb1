"""In-memory comment repository for testing."""

from typing import Optional

from tapestry.domain.model.comment import Comment
from tapestry.domain.repository.comment import CommentRepository
from tapestry.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first.

        Ties keep insertion order (sort is stable).
        """
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: list[PostId]) -> dict[PostId, int]:
        """Count comments for several posts."""
        counts = {post_id: 0 for post_id in post_ids}
        for comment in self._comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment, leaving its replies in place."""
        self._comments.pop(comment_id, None)

    async def delete_by_post(self, post_id: PostId) -> None:
        """Drop every comment of a post, mirroring ON DELETE CASCADE."""
        for comment_id in [
            c.id for c in self._comments.values() if c.post_id == post_id
        ]:
            del self._comments[comment_id]
