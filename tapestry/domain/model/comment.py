"""Comment entity.

Comments are threaded replies on posts. Threading is stored flat: each row
only knows its direct ``parent_id``. The reply tree is rebuilt on read by
``tapestry.domain.service.comment_tree``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from tapestry.domain.model.common import DomainModel
from tapestry.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    - parent_id: direct parent comment within the same post (None for top-level)
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("content")
    @classmethod
    def validate_content_not_blank(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("Comment content cannot be empty")
        return v
