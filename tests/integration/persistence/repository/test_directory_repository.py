"""Integration tests for the PostgreSQL directory repository.

Require a migrated database at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import Coordinates, SalonId
from salonhub.persistence.tables import salons_table
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestDirectoryRepositoryIntegration:
    """Integration tests for PostgresDirectoryRepository."""

    @pytest.mark.asyncio
    async def test_failed_savepoint_keeps_transaction_usable(self, integration_env):
        """A failing write inside a savepoint does not poison later writes."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(DirectoryRepository)
        salon_id = SalonId(f"salon-{uuid4().hex[:8]}")
        await session.execute(
            salons_table.insert().values(
                id=salon_id,
                name="Savepoint Salon",
                street_address="1 Test St",
                city="Rochester",
                state="NY",
                zip_code="14604",
                full_address="1 Test St, Rochester, NY 14604",
            )
        )

        # Act
        with pytest.raises(DBAPIError):
            async with repo.savepoint():
                await repo.update_place_id(salon_id, "place-kept-out")
                # state is VARCHAR(2)
                await session.execute(
                    salons_table.update()
                    .where(salons_table.c.id == salon_id)
                    .values(state="New York")
                )
        await repo.update_coordinates(salon_id, Coordinates(lat=43.1, lng=-77.6))

        # Assert
        salon = next(s for s in await repo.list_salons() if s.id == salon_id)
        assert salon.google_place_id is None
        assert (salon.lat, salon.lng) == (43.1, -77.6)
