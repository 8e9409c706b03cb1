"""Count comments use case."""

from pydantic import BaseModel

from tapestry.domain.service import CommentService
from tapestry.domain.value import PostId


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    post_id: str


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    post_id: str
    count: int


class CountCommentsUseCase:
    """Use case for the "N comments" badge of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        """Count the comments of a post, replies included."""
        count = await self.comment_service.count_for_post(PostId(request.post_id))
        return CountCommentsResponse(post_id=request.post_id, count=count)
