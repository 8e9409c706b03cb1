"""Domain services."""

from .auth_service import AuthService, IdentityClient
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentNode,
    build_comment_forest,
    count_comments,
    flatten_forest,
)
from .jwt_service import JWTService
from .photo_service import PhotoService, PhotoStorage
from .post_service import PostService
from .profile_service import ProfileService, display_name

__all__ = [
    "AuthService",
    "CommentNode",
    "CommentService",
    "IdentityClient",
    "JWTService",
    "PhotoService",
    "PhotoStorage",
    "PostService",
    "ProfileService",
    "Service",
    "build_comment_forest",
    "count_comments",
    "display_name",
    "flatten_forest",
]
