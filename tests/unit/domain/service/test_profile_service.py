"""Unit tests for ProfileService."""

import pytest

from tapestry.domain.error import NotFoundError
from tapestry.domain.repository import ProfileRepository
from tapestry.domain.service import ProfileService, display_name
from tapestry.domain.value import UserId
from tests.factories import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDisplayName:
    """Tests for display_name."""

    def test_uses_full_name(self):
        assert display_name("abcdef123", "Ada Fern") == "Ada Fern"

    def test_placeholder_from_id_prefix(self):
        """Authors without a name get a placeholder built from their id."""
        assert display_name("abcdef123", None) == "User (abcdef)"

    def test_blank_name_uses_placeholder(self):
        assert display_name("abcdef123", "   ") == "User (abcdef)"


class TestGetNames:
    """Tests for get_names method."""

    @pytest.mark.asyncio
    async def test_one_lookup_for_distinct_ids(self, unit_env):
        """Duplicated authors are looked up once, in a single batch."""
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile("alice", "Alice"))
        await profile_repo.save(make_profile("bob", None))

        names = await profile_service.get_names(
            [UserId("alice"), UserId("bob"), UserId("alice"), UserId("ghost")]
        )

        assert names == {"alice": "Alice", "bob": None}
        assert profile_repo.batch_lookups == 1

    @pytest.mark.asyncio
    async def test_empty_batch_skips_lookup(self, unit_env):
        """No authors, no query."""
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        assert await profile_service.get_names([]) == {}
        assert profile_repo.batch_lookups == 0


class TestProfiles:
    """Tests for reading and writing profiles."""

    @pytest.mark.asyncio
    async def test_get_missing_profile(self, unit_env):
        """Unknown accounts raise NotFoundError."""
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_profile(UserId("ghost"))

    @pytest.mark.asyncio
    async def test_upsert_creates_then_updates(self, unit_env):
        """Fields passed as None keep their value on update."""
        profile_service = await unit_env.get(ProfileService)

        created = await profile_service.upsert_profile(
            UserId("alice"), full_name="Alice", email="alice@example.com"
        )
        updated = await profile_service.upsert_profile(
            UserId("alice"), avatar_url="https://img.example.com/a.png"
        )

        assert updated.full_name == "Alice"
        assert updated.email == "alice@example.com"
        assert updated.avatar_url == "https://img.example.com/a.png"
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_ensure_profile_keeps_existing_name(self, unit_env):
        """Sign-in metadata never overwrites an edited name."""
        profile_service = await unit_env.get(ProfileService)
        await profile_service.upsert_profile(UserId("alice"), full_name="Edited")

        profile = await profile_service.ensure_profile(
            UserId("alice"), "alice@example.com", full_name="From Signup"
        )

        assert profile.full_name == "Edited"

    @pytest.mark.asyncio
    async def test_ensure_profile_creates_missing(self, unit_env):
        """Accounts without a profile get one on first sign-in."""
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.ensure_profile(
            UserId("bob"), "bob@example.com", full_name="Bob"
        )

        assert profile.full_name == "Bob"
        assert (await profile_service.get_profile(UserId("bob"))).email == (
            "bob@example.com"
        )
