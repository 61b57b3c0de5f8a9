"""Shared fixtures for camp-grocery tests."""

import logging
from pathlib import Path

import pytest
import respx

from camp_grocery.recipes import RecipeIngredients


@pytest.fixture
def mock_httpx():
    """Activate respx mock for HTTP requests."""
    with respx.mock(assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
def temp_pantry_file(tmp_path) -> Path:
    """Create a temporary pantry file path."""
    return tmp_path / "pantry.json"


@pytest.fixture
def camp_chili() -> RecipeIngredients:
    return RecipeIngredients(
        recipe_id=1,
        recipe_title="Camp Chili",
        ingredients=["1 lb ground beef", "1 can beans", "2 tbsp chili powder"],
    )


@pytest.fixture
def trip_recipes() -> list[RecipeIngredients]:
    """Three recipes for a weekend trip with overlapping ingredients."""
    return [
        RecipeIngredients(
            recipe_id=1,
            recipe_title="Skillet Breakfast",
            ingredients=[
                "6 eggs",
                "4 slices bacon",
                "1 red onion, diced",
                "2 tbsp olive oil",
                "Salt",
            ],
        ),
        RecipeIngredients(
            recipe_id=2,
            recipe_title="Foil Packet Dinner",
            ingredients=[
                "1 lb smoked sausage",
                "3 potatoes, cubed",
                "1 green onion",
                "1 tbsp olive oil",
                "Aluminum foil",
            ],
        ),
        RecipeIngredients(
            recipe_id="ext-77",
            recipe_title="Campfire Pancakes",
            ingredients=["2 cups all-purpose flour", "2 eggs", "1 cup milk", "   "],
        ),
    ]


@pytest.fixture
def recipe_page_html() -> str:
    """A recipe page with JSON-LD nested in @graph."""
    return """
    <html><head>
    <script type="application/ld+json">{"@type": "WebSite"}</script>
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@graph": [
        {"@type": "WebPage", "name": "Dutch Oven Cobbler"},
        {"@type": "Recipe", "name": "Dutch Oven Cobbler",
         "recipeIngredient": ["2 cans peach slices", "1 box yellow cake mix",
                              {"@type": "HowToSupply", "text": "1 stick  butter"}]}
    ]}
    </script>
    </head><body><h1>Dutch Oven Cobbler</h1></body></html>
    """


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they don't outlive the test's streams."""
    yield
    package_logger = logging.getLogger("camp_grocery")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
