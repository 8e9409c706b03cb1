"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tapestry.domain.repository import (
    CommentRepository,
    PostRepository,
    ProfileRepository,
)
from tapestry.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryProfileRepository,
)
from tapestry.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across HTTP requests of one test client.
    Every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_inmemory_comment_repository(self) -> InMemoryCommentRepository:
        """Provide the shared in-memory comment store."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, comments: InMemoryCommentRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return comments

    @provide(scope=Scope.APP)
    def get_post_repository(self, comments: InMemoryCommentRepository) -> PostRepository:
        """Provide in-memory post repository (cascades to comments)."""
        return InMemoryPostRepository(comment_repository=comments)

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()
