"""Assign grocery-store categories to ingredient names."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .merger import MergedIngredient

GroceryCategory = Literal["Produce", "Dairy", "Meat", "Pantry", "Camping Gear"]

GROCERY_CATEGORIES: tuple[GroceryCategory, ...] = (
    "Produce",
    "Dairy",
    "Meat",
    "Pantry",
    "Camping Gear",
)

DEFAULT_CATEGORY: GroceryCategory = "Pantry"

# Staples whose names contain a word from another list ("butter", "chicken",
# "hot dog", "garlic", "corn"). Checked before everything else.
PANTRY_KEYWORDS: tuple[str, ...] = (
    "peanut butter",
    "apple butter",
    "chicken broth",
    "chicken stock",
    "beef broth",
    "beef stock",
    "vegetable broth",
    "bouillon",
    "tomato sauce",
    "tomato paste",
    "coconut milk",
    "cream of tartar",
    "garlic powder",
    "onion powder",
    "hot dog bun",
    "hamburger bun",
    "fish sauce",
    "corn tortilla",
    "corn starch",
    "cornstarch",
    "corn syrup",
)

PRODUCE_KEYWORDS: tuple[str, ...] = (
    "lettuce",
    "tomato",
    "onion",
    "scallion",
    "potato",
    "carrot",
    "celery",
    "garlic",
    "mushroom",
    "broccoli",
    "spinach",
    "kale",
    "cabbage",
    "cucumber",
    "zucchini",
    "squash",
    "eggplant",
    "corn",
    "bell pepper",
    "jalapeno",
    "green bean",
    "avocado",
    "cilantro",
    "parsley",
    "apple",
    "banana",
    "orange",
    "lemon",
    "lime",
    "peach",
    "grape",
    "watermelon",
    "berry",
    "berries",
    "strawberries",
    "blueberries",
    "raspberries",
)

DAIRY_KEYWORDS: tuple[str, ...] = (
    "milk",
    "cheese",
    "cheddar",
    "mozzarella",
    "parmesan",
    "butter",
    "buttermilk",
    "cream",
    "sour cream",
    "yogurt",
    "egg",
)

MEAT_KEYWORDS: tuple[str, ...] = (
    "beef",
    "chicken",
    "pork",
    "bacon",
    "sausage",
    "ham",
    "hamburger",
    "turkey",
    "steak",
    "hot dog",
    "bratwurst",
    "jerky",
    "fish",
    "salmon",
    "tuna",
    "shrimp",
)

CAMPING_GEAR_KEYWORDS: tuple[str, ...] = (
    "propane",
    "firewood",
    "charcoal",
    "lighter fluid",
    "lighter",
    "match",
    "fire starter",
    "tarp",
    "foil",
    "paper plate",
    "paper towel",
    "paper cup",
    "napkin",
    "utensil",
    "trash bag",
    "ziploc bag",
    "bug spray",
    "sunscreen",
)

# First match wins, in this order; anything unmatched is Pantry.
CATEGORY_KEYWORDS: tuple[tuple[GroceryCategory, tuple[str, ...]], ...] = (
    ("Pantry", PANTRY_KEYWORDS),
    ("Produce", PRODUCE_KEYWORDS),
    ("Dairy", DAIRY_KEYWORDS),
    ("Meat", MEAT_KEYWORDS),
    ("Camping Gear", CAMPING_GEAR_KEYWORDS),
)


def _keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    # Whole words only, with an optional plural ending
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternatives})(?:e?s)?\b", re.IGNORECASE)


_CATEGORY_PATTERNS: tuple[tuple[GroceryCategory, re.Pattern[str]], ...] = tuple(
    (category, _keyword_pattern(keywords)) for category, keywords in CATEGORY_KEYWORDS
)


def categorize(display_name: str) -> GroceryCategory:
    """
    Classify an ingredient name into a grocery category.

    Examples:
        "Ground beef" -> "Meat"
        "Eggplant" -> "Produce"  (not Dairy: keywords match whole words)
        "Peanut butter" -> "Pantry"
        "mystery item xyz" -> "Pantry"
    """
    if not isinstance(display_name, str):
        return DEFAULT_CATEGORY

    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(display_name):
            return category

    return DEFAULT_CATEGORY


def categorize_ingredients(merged: Iterable[MergedIngredient]) -> list[MergedIngredient]:
    """Return copies of the merged ingredients with their category set."""
    return [replace(ingredient, category=categorize(ingredient.name)) for ingredient in merged]


def group_by_category(
    merged: Iterable[MergedIngredient],
) -> dict[GroceryCategory, list[MergedIngredient]]:
    """Group categorized ingredients, with every category present in declared order."""
    grouped: dict[GroceryCategory, list[MergedIngredient]] = {c: [] for c in GROCERY_CATEGORIES}
    for ingredient in merged:
        grouped[ingredient.category or categorize(ingredient.name)].append(ingredient)
    return grouped
