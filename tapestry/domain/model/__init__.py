"""Domain model entities for Tapestry."""

from tapestry.domain.model.comment import Comment
from tapestry.domain.model.post import Post
from tapestry.domain.model.profile import Profile

__all__ = [
    "Comment",
    "Post",
    "Profile",
]
