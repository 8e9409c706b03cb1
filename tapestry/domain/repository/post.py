"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tapestry.domain.model.post import Post
from tapestry.domain.value import LifeArea, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, section: Optional[LifeArea] = None) -> List[Post]:
        """Find posts, newest first.

        Args:
            section: Only posts filed under this life-area (None for all)

        Returns:
            List of posts sorted by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its comments.

        Args:
            post_id: The post ID to delete
        """
        pass
