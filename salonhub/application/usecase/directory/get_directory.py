"""Get directory use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.domain.service import DirectoryService


class CertificationResponse(ApiModel):
    id: str
    name: str
    level: str | None = None
    organization: str | None = None
    description: str | None = None


class StylistResponse(ApiModel):
    id: str
    name: str
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    instagram: str | None = None
    photo: str | None = None
    verified: bool
    can_book_online: bool
    price: float | None = None
    certifications: list[CertificationResponse]


class SalonResponse(ApiModel):
    id: str
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str | None = None
    website: str | None = None
    photo: str | None = None
    lat: float
    lng: float
    google_place_id: str | None = None
    google_rating: float | None = None
    google_review_count: int | None = None
    google_reviews_url: str | None = None
    stylists: list[StylistResponse]


class GetDirectoryResponse(ApiModel):
    """Salons with their stylists, plus every known certification."""

    salons: list[SalonResponse]
    certifications: list[CertificationResponse]


class GetDirectoryUseCase:
    """Use case for reading the cached directory."""

    def __init__(self, directory_service: DirectoryService) -> None:
        self.directory_service = directory_service

    async def execute(self, request: None = None) -> GetDirectoryResponse:
        """Execute get directory flow."""
        data = await self.directory_service.get_directory()
        return GetDirectoryResponse.model_validate(data.model_dump())
