"""Camp Grocery - merge camping-trip recipes into one grocery list."""

__version__ = "1.0.0"

from .categorizer import GROCERY_CATEGORIES, GroceryCategory, categorize, categorize_ingredients
from .grocery_list import GroceryItem, GroceryList, build_grocery_list
from .merger import MergedIngredient, RecipeRef, merge_ingredients
from .normalizer import normalize
from .pantry import ConfirmedIngredient, PantryConfig, reconcile
from .recipes import RecipeIngredients, parse_recipe_text, parse_recipe_url

__all__ = [
    "normalize",
    "merge_ingredients",
    "MergedIngredient",
    "RecipeRef",
    "categorize",
    "categorize_ingredients",
    "GroceryCategory",
    "GROCERY_CATEGORIES",
    "RecipeIngredients",
    "parse_recipe_text",
    "parse_recipe_url",
    "ConfirmedIngredient",
    "PantryConfig",
    "reconcile",
    "GroceryItem",
    "GroceryList",
    "build_grocery_list",
]
