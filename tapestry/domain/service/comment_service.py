"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tapestry.domain.error import NotAuthorizedError, NotFoundError
from tapestry.domain.model.comment import Comment
from tapestry.domain.repository import CommentRepository
from tapestry.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            user_id: Author account ID
            content: Comment text, already trimmed
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValueError: If parent comment invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise ValueError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValueError("Parent comment does not belong to this post")

            comment = Comment(
                id=CommentId(str(uuid4())),
                post_id=post_id,
                user_id=user_id,
                content=content,
                parent_id=parent_id,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments sorted by created_at ascending
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=post_id,
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def count_for_post(self, post_id: PostId) -> int:
        """Count the comments of a post.

        Args:
            post_id: Post ID

        Returns:
            Number of comments, replies included
        """
        with logfire.span("comment_service.count_for_post", post_id=post_id):
            return await self.comment_repository.count_by_post(post_id)

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Delete a comment written by ``user_id``.

        Replies are left in place and show up as top-level comments afterwards.

        Args:
            post_id: Post the comment is expected to belong to
            comment_id: Comment ID
            user_id: Account asking for the delete

        Raises:
            NotFoundError: If the comment does not exist on this post
            NotAuthorizedError: If the comment belongs to someone else
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=user_id,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.post_id != post_id:
                logfire.warn(
                    "Comment not found for delete",
                    comment_id=comment_id,
                    post_id=post_id,
                )
                raise NotFoundError("Comment", comment_id)
            if comment.user_id != user_id:
                logfire.warn(
                    "Comment delete rejected, not the author",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError("comment", comment_id, user_id)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id, post_id=post_id)
