"""Post aggregate root.

A post is a short status update filed under a life-area, optionally with a
category and a photo.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from tapestry.domain.model.common import DomainModel
from tapestry.domain.value import LifeArea, PostId, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    user_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    section: Optional[LifeArea] = None
    category: Optional[str] = None
    category_emoji: Optional[str] = None
    category_part: Optional[str] = None
    subcategory: Optional[str] = None
    subcategory_emoji: Optional[str] = None
    photo_url: Optional[str] = None
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("content")
    @classmethod
    def validate_content_not_blank(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("Post content cannot be empty")
        return v
