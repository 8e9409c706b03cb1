"""Life-area routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from tapestry.application.usecase.life_area import (
    ListLifeAreasResponse,
    ListLifeAreasUseCase,
)

router = APIRouter(prefix="/life-areas", tags=["life-areas"], route_class=DishkaRoute)


@router.get("", response_model=ListLifeAreasResponse)
async def list_life_areas(
    list_life_areas_use_case: FromDishka[ListLifeAreasUseCase],
) -> ListLifeAreasResponse:
    """List the life-areas with their categories and writing prompts.

    Also returns the general categories of the dashboard form.
    """
    return await list_life_areas_use_case.execute()
