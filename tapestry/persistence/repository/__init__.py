"""PostgreSQL repository implementations."""

from tapestry.persistence.repository.comment import PostgresCommentRepository
from tapestry.persistence.repository.post import PostgresPostRepository
from tapestry.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
