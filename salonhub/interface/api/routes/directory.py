"""Directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from salonhub.application.usecase.directory import GetDirectoryResponse, GetDirectoryUseCase

router = APIRouter(prefix="/api", tags=["directory"], route_class=DishkaRoute)


@router.get(
    "/directory",
    response_model=GetDirectoryResponse,
    response_model_exclude_none=True,
)
async def get_directory(
    get_directory_use_case: FromDishka[GetDirectoryUseCase],
) -> GetDirectoryResponse:
    """Salons, their stylists and certifications, served from cache.

    A cache miss rebuilds the directory, enriching salons that lack
    coordinates or have stale Google data.
    """
    return await get_directory_use_case.execute()
