"""PostgreSQL implementation of Directory repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List

import logfire
from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonhub.domain.model import Certification, Salon, Stylist, StylistCertification
from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import (
    PLACE_NOT_FOUND,
    Coordinates,
    PlaceDetails,
    SalonId,
    StylistId,
)
from salonhub.persistence.mappers import (
    row_to_certification,
    row_to_salon,
    row_to_stylist,
    row_to_stylist_certification,
)
from salonhub.persistence.tables import (
    certifications_table,
    salons_table,
    stylist_certifications_table,
    stylists_table,
)


class PostgresDirectoryRepository(DirectoryRepository):
    """PostgreSQL implementation of DirectoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list_salons(self) -> List[Salon]:
        stmt = select(salons_table).order_by(asc(salons_table.c.name))
        result = await self.session.execute(stmt)
        return [row_to_salon(row._asdict()) for row in result.fetchall()]

    async def list_stylists(self) -> List[Stylist]:
        stmt = select(stylists_table).order_by(asc(stylists_table.c.name))
        result = await self.session.execute(stmt)
        return [row_to_stylist(row._asdict()) for row in result.fetchall()]

    async def list_certifications(self) -> List[Certification]:
        stmt = select(certifications_table).order_by(asc(certifications_table.c.name))
        result = await self.session.execute(stmt)
        return [row_to_certification(row._asdict()) for row in result.fetchall()]

    async def list_stylist_certifications(self) -> List[StylistCertification]:
        result = await self.session.execute(select(stylist_certifications_table))
        return [row_to_stylist_certification(row._asdict()) for row in result.fetchall()]

    async def list_stylist_names(self) -> List[tuple[StylistId, str]]:
        stmt = select(stylists_table.c.id, stylists_table.c.name)
        result = await self.session.execute(stmt)
        return [(StylistId(row.id), row.name) for row in result.fetchall()]

    async def _update_salon(self, salon_id: SalonId, **values) -> None:
        stmt = salons_table.update().where(salons_table.c.id == salon_id).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_coordinates(self, salon_id: SalonId, coords: Coordinates) -> None:
        """Persist geocoded coordinates."""
        with logfire.span("directory_repository.update_coordinates", salon_id=salon_id):
            await self._update_salon(salon_id, lat=coords.lat, lng=coords.lng)

    async def update_place_id(self, salon_id: SalonId, place_id: str) -> None:
        """Persist a resolved Place ID."""
        await self._update_salon(salon_id, google_place_id=place_id)

    async def mark_place_not_found(self, salon_id: SalonId, synced_at: datetime) -> None:
        """Persist the not-found sentinel with its sync time."""
        await self._update_salon(
            salon_id, google_place_id=PLACE_NOT_FOUND, last_google_sync=synced_at
        )

    async def update_place_details(
        self, salon_id: SalonId, details: PlaceDetails, synced_at: datetime
    ) -> None:
        """Persist reputation data with its sync time."""
        with logfire.span("directory_repository.update_place_details", salon_id=salon_id):
            await self._update_salon(
                salon_id,
                google_rating=details.rating,
                google_review_count=details.review_count,
                google_reviews_url=details.reviews_url,
                last_google_sync=synced_at,
            )

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run the block inside SAVEPOINT so the request transaction survives it."""
        async with self.session.begin_nested():
            yield
