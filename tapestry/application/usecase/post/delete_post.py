"""Delete post use case."""

from pydantic import BaseModel

from tapestry.domain.service import PostService
from tapestry.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Account ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for deleting one's own post together with its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
        """
        await self.post_service.delete_post(
            PostId(request.post_id), UserId(request.user_id)
        )
        return DeletePostResponse(post_id=request.post_id, deleted=True)
