"""Unit tests for the post use cases."""

import pytest

from tapestry.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from tapestry.domain.error import ValidationError
from tapestry.domain.repository import CommentRepository, ProfileRepository
from tapestry.domain.value import LifeArea
from tests.factories import make_comment, make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_area_post_fills_category_emoji(self, unit_env):
        """Category emoji and plant part come from the catalogue."""
        use_case = await unit_env.get(CreatePostUseCase)

        response = await use_case.execute(
            CreatePostRequest(
                user_id="alice",
                content="  Listening to rain  ",
                section=LifeArea.LEAVES,
                category="music",
            )
        )

        assert response.content == "Listening to rain"
        assert response.category == "Music"
        assert response.category_emoji == "🎵"
        assert response.category_part == "Leaves"

    @pytest.mark.asyncio
    async def test_dashboard_post_without_category(self, unit_env):
        """Posts from the dashboard may have neither area nor category."""
        use_case = await unit_env.get(CreatePostUseCase)

        response = await use_case.execute(
            CreatePostRequest(
                user_id="alice",
                content="Hello",
                subcategory="  ",
                photo_url="https://storage.example.com/object/public/photos/x.png",
            )
        )

        assert response.section is None
        assert response.category is None
        assert response.subcategory is None
        assert response.photo_url.endswith("/x.png")

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreatePostRequest(user_id="alice", content="\n "))

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(
                    user_id="alice",
                    content="Hello",
                    section=LifeArea.FRUIT,
                    category="Food",
                )
            )


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_names_and_comment_counts(self, unit_env):
        """Each item carries its author's name and its comment count."""
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListPostsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile("alice", "Alice"))

        first = await create.execute(
            CreatePostRequest(user_id="alice", content="First")
        )
        second = await create.execute(
            CreatePostRequest(user_id="bob456789", content="Second")
        )
        await comment_repo.save(make_comment("c1", post_id=first.post_id))
        await comment_repo.save(
            make_comment("c2", post_id=first.post_id, parent_id="c1", minute=1)
        )

        # Act
        response = await use_case.execute(ListPostsRequest())

        # Assert
        assert response.total == 2
        by_id = {item.post_id: item for item in response.posts}
        assert by_id[first.post_id].comment_count == 2
        assert by_id[first.post_id].display_name == "Alice"
        assert by_id[second.post_id].comment_count == 0
        assert by_id[second.post_id].full_name is None
        assert by_id[second.post_id].display_name == "User (bob456)"
        assert profile_repo.batch_lookups == 1

    @pytest.mark.asyncio
    async def test_section_filter(self, unit_env):
        """Only posts of the requested life-area are listed."""
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListPostsUseCase)
        await create.execute(
            CreatePostRequest(user_id="alice", content="Deep", section=LifeArea.ROOTS)
        )
        await create.execute(CreatePostRequest(user_id="alice", content="Anywhere"))

        response = await use_case.execute(ListPostsRequest(section=LifeArea.ROOTS))

        assert [item.content for item in response.posts] == ["Deep"]
