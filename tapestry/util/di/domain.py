"""Domain layer DI providers."""

from dishka import Scope, provide

from tapestry.config import AuthSettings, StorageSettings
from tapestry.domain.repository import (
    CommentRepository,
    PostRepository,
    ProfileRepository,
)
from tapestry.domain.service import (
    AuthService,
    CommentService,
    IdentityClient,
    JWTService,
    PhotoService,
    PhotoStorage,
    PostService,
    ProfileService,
)
from tapestry.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_client: IdentityClient) -> AuthService:
        """Provide account sign-up/sign-in domain service."""
        return AuthService(identity_client=identity_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_photo_service(
        self, storage: PhotoStorage, storage_settings: StorageSettings
    ) -> PhotoService:
        """Provide photo domain service."""
        return PhotoService(
            storage=storage, max_upload_bytes=storage_settings.max_upload_bytes
        )
