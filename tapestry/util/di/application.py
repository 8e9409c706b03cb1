"""Application layer DI providers."""

from dishka import Scope, provide

from tapestry.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignUpUseCase,
)
from tapestry.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from tapestry.application.usecase.life_area import ListLifeAreasUseCase
from tapestry.application.usecase.photo import UploadPhotoUseCase
from tapestry.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
)
from tapestry.application.usecase.profile import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from tapestry.domain.repository import CommentRepository
from tapestry.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PhotoService,
    PostService,
    ProfileService,
)
from tapestry.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
    ) -> SignUpUseCase:
        """Provide sign-up use case."""
        return SignUpUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    # Life-area use cases
    @provide(scope=Scope.APP)
    def get_list_life_areas_use_case(self) -> ListLifeAreasUseCase:
        """Provide list life areas use case."""
        return ListLifeAreasUseCase()

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        comment_repository: CommentRepository,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            profile_service=profile_service,
            comment_repository=comment_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        profile_service: ProfileService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Photo use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_photo_use_case(
        self, photo_service: PhotoService
    ) -> UploadPhotoUseCase:
        """Provide upload photo use case."""
        return UploadPhotoUseCase(photo_service=photo_service)
