"""Life-area use cases."""

from .list_life_areas import (
    CategoryItem,
    LifeAreaItem,
    ListLifeAreasResponse,
    ListLifeAreasUseCase,
)

__all__ = [
    "CategoryItem",
    "LifeAreaItem",
    "ListLifeAreasResponse",
    "ListLifeAreasUseCase",
]
