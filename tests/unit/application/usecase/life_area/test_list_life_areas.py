"""Unit tests for ListLifeAreasUseCase."""

import pytest

from tapestry.application.usecase.life_area import ListLifeAreasUseCase


@pytest.mark.asyncio
async def test_lists_areas_in_plant_order():
    """Areas follow the plant from roots to fruit."""
    response = await ListLifeAreasUseCase().execute()

    assert [area.id.value for area in response.life_areas] == [
        "roots",
        "stem",
        "leaves",
        "bloom",
        "fruit",
    ]


@pytest.mark.asyncio
async def test_area_catalogues_and_prompts():
    """Catalogue-less areas have no categories, roots carries prompts."""
    response = await ListLifeAreasUseCase().execute()
    areas = {area.id.value: area for area in response.life_areas}

    assert [c.name for c in areas["leaves"].categories] == [
        "Music",
        "Food",
        "Vibe",
        "Moment",
        "Update",
    ]
    assert areas["stem"].categories == []
    assert len(areas["roots"].prompts) == 7
    assert areas["roots"].label == "Roots"


@pytest.mark.asyncio
async def test_general_categories_name_their_part():
    """Dashboard categories carry the plant part, or None."""
    response = await ListLifeAreasUseCase().execute()
    parts = {c.name: c.part for c in response.general_categories}

    assert parts["Joy"] == "Leaves"
    assert parts["Inner Work"] == "Roots"
    assert parts["Share"] is None
