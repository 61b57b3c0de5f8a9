"""Recipe inputs: JSON files, pasted ingredient text and third-party recipe URLs."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
from bs4 import BeautifulSoup
from recipe_scrapers import scrape_html
from recipe_scrapers._exceptions import WebsiteNotImplementedError

from .config import HTTP_TIMEOUT, USER_AGENT
from .exceptions import RecipeFetchError, RecipeLoadError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RecipeIngredients:
    """One recipe's worth of raw ingredient lines, as fed to the merger."""

    recipe_id: int | str
    recipe_title: str
    ingredients: list[str] = field(default_factory=list)
    source_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization."""
        data: dict[str, Any] = {
            "id": self.recipe_id,
            "title": self.recipe_title,
            "ingredients": list(self.ingredients),
        }
        if self.source_url:
            data["sourceUrl"] = self.source_url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecipeIngredients":
        """
        Create from a dict.

        Accepts both "id"/"title" and "recipeId"/"recipeTitle" spellings.
        """
        if not isinstance(data, dict):
            raise RecipeLoadError(f"Recipe entry must be an object, got {type(data).__name__}")

        recipe_id = data.get("recipeId", data.get("id"))
        if recipe_id is None:
            raise RecipeLoadError("Recipe entry is missing an id")

        title = data.get("recipeTitle", data.get("title"))
        if not isinstance(title, str):
            raise RecipeLoadError(f"Recipe {recipe_id!r} is missing a title")

        ingredients = data.get("ingredients", [])
        if isinstance(ingredients, str):
            ingredients = parse_ingredients_text(ingredients)
        if not isinstance(ingredients, list):
            raise RecipeLoadError(f"Recipe {recipe_id!r} has no ingredient list")

        return cls(
            recipe_id=recipe_id,
            recipe_title=title,
            ingredients=[ing for ing in ingredients if isinstance(ing, str)],
            source_url=data.get("sourceUrl") or data.get("source_url"),
        )


def parse_ingredients_text(text: str) -> list[str]:
    """
    Split pasted ingredient text into lines.

    Strips bullet points and list numbering, collapses whitespace and drops
    blank lines and section headers.

    Args:
        text: Multi-line text with ingredients

    Returns:
        List of cleaned ingredient lines
    """
    lines = []

    for line in text.strip().split("\n"):
        line = line.strip()
        # Skip empty lines and headers
        if not line or line.lower().startswith(("ingredients", "for the", "---")):
            continue
        line = re.sub(r"^[\-\*•]\s*", "", line)
        line = re.sub(r"^\d+\.\s+", "", line)
        line = re.sub(r"\s+", " ", line).strip()

        if line:
            lines.append(line)

    return lines


def load_recipes(path: str | Path) -> list[RecipeIngredients]:
    """
    Load recipes from a JSON file.

    The file holds either a list of recipe objects or {"recipes": [...]}.

    Raises:
        RecipeLoadError: If the file is unreadable or malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RecipeLoadError(f"Could not read {path}: {e}") from e

    if isinstance(data, dict) and "recipes" in data:
        data = data["recipes"]
    if not isinstance(data, list):
        raise RecipeLoadError(f"{path} must contain a list of recipes")

    recipes = [RecipeIngredients.from_dict(entry) for entry in data]
    logger.debug(f"Loaded {len(recipes)} recipe(s) from {path}")
    return recipes


def _ingredient_texts(raw: Any) -> list[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []

    texts = []
    for item in raw:
        if isinstance(item, str):
            text = item
        elif isinstance(item, dict):
            text = item.get("text") or ""
        else:
            continue
        text = " ".join(text.split())
        if text:
            texts.append(text)
    return texts


def _find_recipe_node(data: Any) -> dict[str, Any] | None:
    """Find the first schema.org Recipe object in a JSON-LD payload."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict):
            continue
        node_type = item.get("@type")
        if node_type == "Recipe" or (isinstance(node_type, list) and "Recipe" in node_type):
            return item
        if "@graph" in item:
            found = _find_recipe_node(item["@graph"])
            if found:
                return found
    return None


def extract_json_ld_recipe(html: str) -> dict[str, Any] | None:
    """
    Extract title and ingredients from JSON-LD script tags.

    Returns:
        {"title": ..., "ingredients": [...]} or None when no recipe with a
        title and at least one ingredient is present
    """
    soup = BeautifulSoup(html, "html.parser")

    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            logger.debug("Skipping unparseable JSON-LD block")
            continue

        recipe = _find_recipe_node(data)
        if not recipe:
            continue

        title = recipe.get("name") or recipe.get("headline") or ""
        ingredients = _ingredient_texts(recipe.get("recipeIngredient"))
        if title and ingredients:
            return {"title": title, "ingredients": ingredients}

    return None


def fetch_html(url: str) -> str:
    """Fetch a recipe page."""
    try:
        response = httpx.get(
            url,
            follow_redirects=True,
            timeout=HTTP_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise RecipeFetchError(f"Failed to fetch {url}: {e}") from e
    return response.text


def parse_recipe_url(url: str) -> RecipeIngredients:
    """
    Import a third-party recipe's ingredients from a URL.

    Uses recipe-scrapers for supported sites and falls back to JSON-LD
    structured data for everything else. The URL doubles as the recipe id.

    Raises:
        RecipeFetchError: If the page cannot be fetched or holds no recipe
    """
    html = fetch_html(url)

    try:
        scraper = scrape_html(html, org_url=url, supported_only=True)
        title = scraper.title()
        ingredients = _ingredient_texts(scraper.ingredients())
        logger.debug(f"Parsed {url} with recipe-scrapers")
        return RecipeIngredients(
            recipe_id=url, recipe_title=title, ingredients=ingredients, source_url=url
        )
    except WebsiteNotImplementedError:
        logger.debug(f"No dedicated scraper for {url}, trying JSON-LD")

    recipe = extract_json_ld_recipe(html)
    if recipe is None:
        raise RecipeFetchError(f"No recipe found at {url}")

    return RecipeIngredients(
        recipe_id=url,
        recipe_title=recipe["title"],
        ingredients=recipe["ingredients"],
        source_url=url,
    )


def parse_recipe_text(
    title: str, ingredients_text: str, recipe_id: int | str | None = None
) -> RecipeIngredients:
    """
    Create a recipe from manual text input.

    Args:
        title: Recipe name
        ingredients_text: Multi-line ingredient list
        recipe_id: Optional id; defaults to the title

    Returns:
        RecipeIngredients
    """
    return RecipeIngredients(
        recipe_id=recipe_id if recipe_id is not None else title,
        recipe_title=title,
        ingredients=parse_ingredients_text(ingredients_text),
    )
