"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from tapestry.domain.service import (
    CommentNode,
    CommentService,
    ProfileService,
    build_comment_forest,
    count_comments,
    display_name,
    flatten_forest,
)
from tapestry.domain.value import PostId


class CommentItem(BaseModel):
    """Comment item in the thread.

    Items are listed depth first, so a reply always follows its parent and
    the clients indent by ``depth``.
    """

    comment_id: str
    post_id: str
    user_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    full_name: str | None
    display_name: str
    depth: int  # 0 for top-level comments
    reply_ids: list[str]  # Direct replies, oldest first

    @classmethod
    def from_domain(cls, node: CommentNode, depth: int) -> "CommentItem":
        """Convert a domain CommentNode to a flat response item.

        Args:
            node: Domain comment node
            depth: Nesting level of the node in the thread

        Returns:
            Response item referencing its direct replies by id
        """
        return cls(
            comment_id=node.id,
            post_id=node.post_id,
            user_id=node.user_id,
            content=node.content,
            parent_id=node.parent_id,
            created_at=node.created_at,
            full_name=node.full_name,
            display_name=display_name(node.user_id, node.full_name),
            depth=depth,
            reply_ids=[reply.id for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the comment thread of a post."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service for commenter names
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Both fetches finish before the tree is built, and the tree is rebuilt
        from scratch on every call.

        Args:
            request: Get comments request with post ID

        Returns:
            Every comment once, in depth-first thread order, and the total count
        """
        post_id = PostId(request.post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        names = await self.profile_service.get_names(c.user_id for c in comments)

        forest = build_comment_forest(comments, names)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[
                CommentItem.from_domain(node, depth)
                for node, depth in flatten_forest(forest)
            ],
            total=count_comments(comments),
        )
