"""Repository interfaces for Tapestry domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tapestry.domain.repository.comment import CommentRepository
from tapestry.domain.repository.post import PostRepository
from tapestry.domain.repository.profile import ProfileRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "ProfileRepository",
]
