"""Integration tests for the PostgreSQL forum repositories.

Require a migrated database at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest

from salonhub.domain.model import NewReply, NewTopic
from salonhub.domain.repository import ReplyRepository, TopicRepository
from salonhub.domain.value import TopicId, TopicSortOrder
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestTopicRepositoryIntegration:
    """Integration tests for PostgresTopicRepository."""

    @pytest.mark.asyncio
    async def test_counters_and_filters(self, integration_env):
        """Counters increment atomically and array/text filters apply."""
        # Arrange
        topic_repo = await integration_env.get(TopicRepository)
        reply_repo = await integration_env.get(ReplyRepository)
        marker = uuid4().hex
        topic = await topic_repo.create(
            NewTopic(
                title=f"Integration {marker}",
                content="100% curl_friendly",
                tags=[marker, "products"],
                mentioned_stylist_ids=["jane-doe"],
            )
        )

        # Act
        await reply_repo.create(NewReply(topic_id=topic.id, content="First reply"))
        await topic_repo.record_reply(topic.id, at=topic.updated_at)
        assert await topic_repo.increment_upvotes(topic.id)
        assert await topic_repo.increment_flags(topic.id)

        # Assert
        saved = await topic_repo.find_by_id(topic.id)
        assert saved.replies_count == 1
        assert saved.upvotes_count == 1
        assert saved.flag_count == 1
        assert saved.mentioned_stylist_ids == ["jane-doe"]

        by_tag = await topic_repo.find_all(sort=TopicSortOrder.NEWEST, tags=[marker])
        assert [t.id for t in by_tag] == [topic.id]

        # LIKE wildcards in the search term are matched literally
        by_search = await topic_repo.find_all(search=f"{marker[:8]}", tags=[marker])
        assert [t.id for t in by_search] == [topic.id]
        assert await topic_repo.find_all(search="100%friendly", tags=[marker]) == []

    @pytest.mark.asyncio
    async def test_missing_rows_report_false(self, integration_env):
        topic_repo = await integration_env.get(TopicRepository)

        assert not await topic_repo.increment_upvotes(TopicId(2_000_000_000))
        assert not await topic_repo.increment_flags(TopicId(2_000_000_000))
