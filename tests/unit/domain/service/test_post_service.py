"""Unit tests for PostService."""

import pytest

from tapestry.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from tapestry.domain.repository import CommentRepository, PostRepository
from tapestry.domain.service import PostService
from tapestry.domain.value import LifeArea, PostId, UserId
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        """Posts are listed by created_at descending."""
        post_service = await unit_env.get(PostService)
        await post_service.save_post(make_post("old", minute=1))
        await post_service.save_post(make_post("new", minute=9))

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_filter_by_life_area(self, unit_env):
        """Only posts of the requested area are returned."""
        post_service = await unit_env.get(PostService)
        await post_service.save_post(make_post("r", section=LifeArea.ROOTS))
        await post_service.save_post(make_post("l", section=LifeArea.LEAVES))
        await post_service.save_post(make_post("d"))

        posts = await post_service.list_posts(section=LifeArea.ROOTS)

        assert [p.id for p in posts] == ["r"]


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_author_delete_removes_comments(self, unit_env):
        """Deleting a post drops its comments too."""
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        await post_service.save_post(make_post("p1", user_id="alice"))
        await comment_repo.save(make_comment("c1", post_id="p1"))
        await comment_repo.save(make_comment("c2", post_id="p1", parent_id="c1"))

        await post_service.delete_post(PostId("p1"), UserId("alice"))

        assert await post_service.get_post_by_id(PostId("p1")) is None
        assert await comment_repo.find_by_post(PostId("p1")) == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Only the author may delete a post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_service.save_post(make_post("p1", user_id="alice"))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(PostId("p1"), UserId("mallory"))

        assert await post_repo.find_by_id(PostId("p1")) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Deleting an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId("nope"), UserId("alice"))


class TestResolveCategory:
    """Tests for resolve_category."""

    def test_no_category(self):
        """Blank categories resolve to None."""
        assert PostService.resolve_category(LifeArea.LEAVES, None) is None
        assert PostService.resolve_category(None, "  ") is None

    def test_area_category_case_insensitive(self):
        """Area catalogue lookup ignores case."""
        category, part = PostService.resolve_category(LifeArea.LEAVES, "music")

        assert category.name == "Music"
        assert category.emoji == "🎵"
        assert part == "Leaves"

    def test_unknown_area_category_rejected(self):
        """Areas with a catalogue only accept their own categories."""
        with pytest.raises(ValidationError):
            PostService.resolve_category(LifeArea.FRUIT, "Music")

    def test_free_form_area_uses_area_emoji(self):
        """Areas without a catalogue keep the name with the area emoji."""
        category, part = PostService.resolve_category(LifeArea.ROOTS, " Healing ")

        assert category.name == "Healing"
        assert category.emoji == LifeArea.ROOTS.emoji
        assert part == "Roots"

    def test_general_category(self):
        """Dashboard posts pick from the general categories."""
        category, part = PostService.resolve_category(None, "insight")

        assert category.name == "Insight"
        assert part == "Flower"

    def test_general_category_without_part(self):
        """A general category with no plant part resolves the part to None."""
        category, part = PostService.resolve_category(None, "Share")

        assert category.emoji == "🧺"
        assert part is None

    def test_unknown_general_category_rejected(self):
        """Unknown dashboard categories raise ValidationError."""
        with pytest.raises(ValidationError):
            PostService.resolve_category(None, "Gardening")
