"""Unit tests for CreateTopicUseCase."""

import pytest

from salonhub.application.usecase.forum import CreateTopicRequest, CreateTopicUseCase
from salonhub.domain.error import RateLimitError
from salonhub.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_stylist
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTopicUseCase:
    """Tests for CreateTopicUseCase."""

    @pytest.mark.asyncio
    async def test_creates_topic_with_mentions(self, unit_env):
        """Stylists named in the post are linked to the topic."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        jane = make_stylist("jane-doe", "Jane Doe")
        store.stylists[jane.id] = jane
        use_case = await unit_env.get(CreateTopicUseCase)

        # Act
        response = await use_case.execute(
            CreateTopicRequest(
                title="My stylist",
                content="I love Jane Doe, best curly cut ever",
                tags=["cuts"],
                client_key="1.2.3.4",
            )
        )

        # Assert
        assert response.id >= 1
        assert response.mentioned_stylist_ids == ["jane-doe"]
        assert response.tags == ["cuts"]
        assert response.replies_count == 0

    @pytest.mark.asyncio
    async def test_spam_rejected(self, unit_env):
        use_case = await unit_env.get(CreateTopicUseCase)

        with pytest.raises(RateLimitError) as exc_info:
            await use_case.execute(
                CreateTopicRequest(
                    title="Deal",
                    content="Buy now and get free money",
                    client_key="1.2.3.4",
                )
            )

        assert exc_info.value.reason == "Content contains spam keywords"

    @pytest.mark.asyncio
    async def test_response_serializes_camel_case(self, unit_env):
        use_case = await unit_env.get(CreateTopicUseCase)

        response = await use_case.execute(
            CreateTopicRequest(
                title="Wash day",
                content="How often do you all wash?",
                client_key="1.2.3.4",
            )
        )

        body = response.model_dump(by_alias=True)
        assert "repliesCount" in body
        assert "mentionedStylistIds" in body
        assert "createdAt" in body
