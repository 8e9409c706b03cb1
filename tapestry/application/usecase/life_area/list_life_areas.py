"""List life areas use case."""

from pydantic import BaseModel

from tapestry.domain.value import GENERAL_CATEGORIES, LifeArea


class CategoryItem(BaseModel):
    """Category offered by a post form."""

    name: str
    emoji: str
    description: str
    part: str | None = None  # Plant part, for dashboard categories


class LifeAreaItem(BaseModel):
    """Life-area in response."""

    id: LifeArea
    label: str
    emoji: str
    tagline: str
    categories: list[CategoryItem]
    prompts: list[str]


class ListLifeAreasResponse(BaseModel):
    """List life areas response."""

    life_areas: list[LifeAreaItem]
    general_categories: list[CategoryItem]


class ListLifeAreasUseCase:
    """Use case for the static catalogue behind the post forms."""

    async def execute(self) -> ListLifeAreasResponse:
        """Return every life-area in display order with its categories."""
        return ListLifeAreasResponse(
            life_areas=[
                LifeAreaItem(
                    id=area,
                    label=area.label,
                    emoji=area.emoji,
                    tagline=area.tagline,
                    categories=[
                        CategoryItem(
                            name=c.name, emoji=c.emoji, description=c.description
                        )
                        for c in area.categories
                    ],
                    prompts=list(area.prompts),
                )
                for area in LifeArea
            ],
            general_categories=[
                CategoryItem(
                    name=c.name,
                    emoji=c.emoji,
                    description=c.description,
                    part=part or None,
                )
                for c, part in GENERAL_CATEGORIES
            ],
        )
