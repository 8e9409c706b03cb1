"""Domain value objects for Tapestry."""

from tapestry.domain.value.identifiers import CommentId, PostId, UserId
from tapestry.domain.value.types import (
    GENERAL_CATEGORIES,
    Category,
    IdentityAccount,
    LifeArea,
    find_general_category,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Category",
    "IdentityAccount",
    "LifeArea",
    "GENERAL_CATEGORIES",
    "find_general_category",
]
