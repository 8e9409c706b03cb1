"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from tapestry.domain.model import Comment, Post, Profile
from tapestry.domain.value import CommentId, LifeArea, PostId, UserId


def _str_id(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_str_id(row["id"])),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    section = row.get("section")
    return Post(
        id=PostId(_str_id(row["id"])),
        user_id=UserId(_str_id(row["user_id"])),
        content=row["content"],
        section=LifeArea(section) if section else None,
        category=row.get("category"),
        category_emoji=row.get("category_emoji"),
        category_part=row.get("category_part"),
        subcategory=row.get("subcategory"),
        subcategory_emoji=row.get("subcategory_emoji"),
        photo_url=row.get("photo_url"),
        likes=row.get("likes") or 0,
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["section"] = post.section.value if post.section else None
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_str_id(row["id"])),
        post_id=PostId(_str_id(row["post_id"])),
        user_id=UserId(_str_id(row["user_id"])),
        content=row["content"],
        parent_id=CommentId(_str_id(parent_id)) if parent_id else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
