"""Directory repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import AsyncContextManager, List

from salonhub.domain.model.directory import (
    Certification,
    Salon,
    Stylist,
    StylistCertification,
)
from salonhub.domain.value import Coordinates, PlaceDetails, SalonId, StylistId


class DirectoryRepository(ABC):
    """Repository for salons, stylists and certifications.

    The directory is read in full and joined in memory; writes are limited
    to the enrichment fields of a salon.
    """

    @abstractmethod
    async def list_salons(self) -> List[Salon]:
        pass

    @abstractmethod
    async def list_stylists(self) -> List[Stylist]:
        pass

    @abstractmethod
    async def list_certifications(self) -> List[Certification]:
        pass

    @abstractmethod
    async def list_stylist_certifications(self) -> List[StylistCertification]:
        pass

    @abstractmethod
    async def list_stylist_names(self) -> List[tuple[StylistId, str]]:
        """Id and name of every stylist, for mention matching."""
        pass

    @abstractmethod
    async def update_coordinates(self, salon_id: SalonId, coords: Coordinates) -> None:
        """Persist geocoded coordinates."""
        pass

    @abstractmethod
    async def update_place_id(self, salon_id: SalonId, place_id: str) -> None:
        """Persist a resolved Google Place ID."""
        pass

    @abstractmethod
    async def mark_place_not_found(self, salon_id: SalonId, synced_at: datetime) -> None:
        """Persist the not-found sentinel so the lookup is never retried."""
        pass

    @abstractmethod
    async def update_place_details(
        self, salon_id: SalonId, details: PlaceDetails, synced_at: datetime
    ) -> None:
        """Persist rating, review count and review link with a fresh sync time."""
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager[None]:
        """Scope a salon's writes so a failure undoes only those writes.

        An exception leaving the block rolls back what was written inside
        it and propagates; writes made before the block are kept.
        """
        pass
