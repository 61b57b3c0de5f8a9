"""Grocery list assembly: merge, categorize, reconcile, group."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .categorizer import GROCERY_CATEGORIES, GroceryCategory, categorize, categorize_ingredients
from .logging_config import get_logger
from .merger import MergedIngredient, merge_ingredients
from .pantry import ConfirmedIngredient, PantryConfig, reconcile
from .recipes import RecipeIngredients

logger = get_logger(__name__)

EXTERNAL_MEAL_SUFFIX = " (see trip for recipe details)"


@dataclass
class GroceryItem:
    """One line on the final grocery list."""

    name: str
    category: GroceryCategory
    checked: bool = False
    amount: str | None = None
    recipes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "category": self.category,
            "checked": self.checked,
        }
        if self.amount:
            data["amount"] = self.amount
        if self.recipes:
            data["recipes"] = list(self.recipes)
        return data

    @classmethod
    def from_merged(cls, ingredient: MergedIngredient, checked: bool = False) -> "GroceryItem":
        return cls(
            name=ingredient.name,
            category=ingredient.category or categorize(ingredient.name),
            checked=checked,
            amount=ingredient.display_amount,
            recipes=ingredient.recipe_titles,
        )


@dataclass
class GroceryList:
    """The finished list. Checked items are ones already on hand."""

    items: list[GroceryItem] = field(default_factory=list)
    recipe_titles: list[str] = field(default_factory=list)

    @property
    def grouped(self) -> dict[GroceryCategory, list[GroceryItem]]:
        """Items by category, every category present in declared order."""
        grouped: dict[GroceryCategory, list[GroceryItem]] = {c: [] for c in GROCERY_CATEGORIES}
        for item in self.items:
            grouped[item.category].append(item)
        return grouped

    @property
    def needed(self) -> list[GroceryItem]:
        return [item for item in self.items if not item.checked]

    @property
    def already_have(self) -> list[GroceryItem]:
        return [item for item in self.items if item.checked]

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipes": list(self.recipe_titles),
            "items": [item.to_dict() for item in self.items],
            "grouped": {
                category: [item.to_dict() for item in items]
                for category, items in self.grouped.items()
            },
        }


def aggregate(recipes: Sequence[RecipeIngredients]) -> list[MergedIngredient]:
    """Merge and categorize the ingredients of several recipes."""
    total = sum(len(recipe.ingredients) for recipe in recipes)
    logger.info(f"Total ingredients before merge: {total}")

    merged = categorize_ingredients(merge_ingredients(recipes))
    logger.info(f"Total unique ingredients after merge: {len(merged)}")
    return merged


def finalize(
    confirmed: Iterable[ConfirmedIngredient],
    external_meals: Iterable[str] = (),
    recipe_titles: Iterable[str] = (),
) -> GroceryList:
    """
    Turn confirmed ingredients into the final list.

    Needed items come first (unchecked), then already-have items (checked),
    then one Pantry reminder per external meal whose ingredients are unknown.
    """
    confirmed = list(confirmed)
    needed = [GroceryItem.from_merged(c.ingredient) for c in confirmed if c.is_needed]
    owned = [
        GroceryItem.from_merged(c.ingredient, checked=True) for c in confirmed if not c.is_needed
    ]
    external = [
        GroceryItem(name=title + EXTERNAL_MEAL_SUFFIX, category="Pantry")
        for title in external_meals
        if title.strip()
    ]

    grocery_list = GroceryList(items=needed + owned + external, recipe_titles=list(recipe_titles))
    logger.info(
        f"Grocery list ready: {len(needed)} needed, {len(owned)} already have, "
        f"{len(external)} external meal(s)"
    )
    return grocery_list


def build_grocery_list(
    recipes: Sequence[RecipeIngredients],
    already_have: Iterable[str] = (),
    external_meals: Iterable[str] = (),
    pantry: PantryConfig | None = None,
) -> GroceryList:
    """
    Build a grocery list from recipes in one go.

    Args:
        recipes: Recipes whose ingredients go on the list
        already_have: Raw texts or keys of items already on hand
        external_meals: Titles of meals without a known ingredient list
        pantry: Optional pantry configuration

    Returns:
        GroceryList
    """
    merged = aggregate(recipes)
    confirmed = reconcile(merged, already_have, pantry)
    return finalize(confirmed, external_meals, [recipe.recipe_title for recipe in recipes])
