"""Delete comment use case."""

from pydantic import BaseModel

from tapestry.domain.service import CommentService
from tapestry.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Account ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting one's own comment.

    Replies to the deleted comment stay and are shown as top-level comments.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist on the post
            NotAuthorizedError: If the requester is not the author
        """
        await self.comment_service.delete_comment(
            post_id=PostId(request.post_id),
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
        )
        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
