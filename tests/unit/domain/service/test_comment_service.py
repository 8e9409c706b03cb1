"""Unit tests for CommentService."""

import pytest

from tapestry.domain.error import NotAuthorizedError, NotFoundError
from tapestry.domain.repository import CommentRepository
from tapestry.domain.service import CommentService
from tapestry.domain.value import CommentId, PostId, UserId
from tests.factories import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment has no parent and is saved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await comment_service.create_comment(
            post_id=PostId("post-1"),
            user_id=UserId("user-1"),
            content="Beautiful",
        )

        # Assert
        assert result.parent_id is None
        assert result.content == "Beautiful"
        assert result.post_id == "post-1"
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_reply_keeps_parent(self, unit_env):
        """Reply points at its parent comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("parent", post_id="post-1"))

        # Act
        result = await comment_service.create_comment(
            post_id=PostId("post-1"),
            user_id=UserId("user-2"),
            content="Agreed",
            parent_id=CommentId("parent"),
        )

        # Assert
        assert result.parent_id == "parent"

    @pytest.mark.asyncio
    async def test_create_comment_with_invalid_parent_raises_error(self, unit_env):
        """Replying to a comment that does not exist is rejected."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="Parent comment not found"):
            await comment_service.create_comment(
                post_id=PostId("post-1"),
                user_id=UserId("user-1"),
                content="Test",
                parent_id=CommentId("missing"),
            )

    @pytest.mark.asyncio
    async def test_create_comment_with_parent_on_other_post_raises_error(
        self, unit_env
    ):
        """The parent must belong to the same post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("elsewhere", post_id="post-2"))

        with pytest.raises(ValueError, match="does not belong to this post"):
            await comment_service.create_comment(
                post_id=PostId("post-1"),
                user_id=UserId("user-1"),
                content="Test",
                parent_id=CommentId("elsewhere"),
            )

    @pytest.mark.asyncio
    async def test_created_ids_are_unique(self, unit_env):
        """Every new comment gets its own id."""
        comment_service = await unit_env.get(CommentService)

        first = await comment_service.create_comment(
            PostId("post-1"), UserId("user-1"), "one"
        )
        second = await comment_service.create_comment(
            PostId("post-1"), UserId("user-1"), "two"
        )

        assert first.id != second.id


class TestGetComments:
    """Tests for reading comments."""

    @pytest.mark.asyncio
    async def test_comments_for_post_are_oldest_first(self, unit_env):
        """Comments come back sorted by created_at ascending."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("late", minute=5))
        await comment_repo.save(make_comment("early", minute=1))
        await comment_repo.save(make_comment("other", post_id="post-2", minute=0))

        comments = await comment_service.get_comments_for_post(PostId("post-1"))

        assert [c.id for c in comments] == ["early", "late"]

    @pytest.mark.asyncio
    async def test_count_for_post_includes_replies(self, unit_env):
        """Replies count towards the total."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("a"))
        await comment_repo.save(make_comment("b", parent_id="a", minute=1))

        assert await comment_service.count_for_post(PostId("post-1")) == 2
        assert await comment_service.count_for_post(PostId("post-2")) == 0

    @pytest.mark.asyncio
    async def test_get_comment_by_id_missing_returns_none(self, unit_env):
        """Unknown ids resolve to None."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_by_id(CommentId("nope")) is None


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """The author removes their comment."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("a", user_id="alice"))

        await comment_service.delete_comment(
            PostId("post-1"), CommentId("a"), UserId("alice")
        )

        assert await comment_repo.find_by_id(CommentId("a")) is None

    @pytest.mark.asyncio
    async def test_delete_keeps_replies(self, unit_env):
        """Replies of a deleted comment remain stored."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("a", user_id="alice"))
        await comment_repo.save(make_comment("b", parent_id="a", minute=1))

        await comment_service.delete_comment(
            PostId("post-1"), CommentId("a"), UserId("alice")
        )

        remaining = await comment_repo.find_by_post(PostId("post-1"))
        assert [c.id for c in remaining] == ["b"]

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Deleting someone else's comment is refused."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("a", user_id="alice"))

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(
                PostId("post-1"), CommentId("a"), UserId("mallory")
            )

        assert await comment_repo.find_by_id(CommentId("a")) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        """Unknown comment ids are reported as not found."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(
                PostId("post-1"), CommentId("missing"), UserId("alice")
            )

    @pytest.mark.asyncio
    async def test_delete_through_wrong_post_raises_not_found(self, unit_env):
        """A comment is only reachable through its own post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("a", user_id="alice"))

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(
                PostId("post-2"), CommentId("a"), UserId("alice")
            )
