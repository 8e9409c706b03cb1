"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from tapestry.domain.model.comment import Comment
from tapestry.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        The reply tree is built from this flat list, which relies on the
        ascending ``created_at`` order.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments sorted by created_at ascending
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: List[PostId]) -> Dict[PostId, int]:
        """Count comments for several posts in one query.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post_id to count, 0 for posts without comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Replies to the deleted comment are kept and become orphans.

        Args:
            comment_id: The comment ID to delete
        """
        pass
