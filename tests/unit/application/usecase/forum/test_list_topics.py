"""Unit tests for ListTopicsUseCase."""

import pytest

from salonhub.application.usecase.forum import ListTopicsRequest, ListTopicsUseCase
from salonhub.domain.service import ForumService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListTopicsUseCase:
    """Tests for ListTopicsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_sort_falls_back_to_recent(self, unit_env):
        # Arrange
        forum_service = await unit_env.get(ForumService)
        old = await forum_service.create_topic("Old", "Created first")
        new = await forum_service.create_topic("New", "Created second")
        await forum_service.create_reply(old.id, "Bump")
        use_case = await unit_env.get(ListTopicsUseCase)

        # Act
        topics = await use_case.execute(ListTopicsRequest(sort_by="bogus"))

        # Assert
        assert [t.id for t in topics] == [old.id, new.id]

    @pytest.mark.asyncio
    async def test_limit_clamped_to_max_page_size(self, unit_env):
        forum_service = await unit_env.get(ForumService)
        for i in range(3):
            await forum_service.create_topic(f"Topic {i}", "Body")
        use_case = await unit_env.get(ListTopicsUseCase)

        topics = await use_case.execute(ListTopicsRequest(limit=10_000))

        assert len(topics) == 3

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, unit_env):
        forum_service = await unit_env.get(ForumService)
        for i in range(3):
            await forum_service.create_topic(f"Topic {i}", "Body")
        use_case = await unit_env.get(ListTopicsUseCase)

        topics = await use_case.execute(
            ListTopicsRequest(sort_by="newest", limit=2, offset=2)
        )

        assert [t.title for t in topics] == ["Topic 0"]
