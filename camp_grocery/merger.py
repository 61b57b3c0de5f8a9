"""Merge ingredient mentions from several recipes into one list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .logging_config import get_logger
from .normalizer import clean_display_name, normalize
from .units import combine_amounts, split_amount

if TYPE_CHECKING:
    from .categorizer import GroceryCategory
    from .recipes import RecipeIngredients

logger = get_logger(__name__)

RecipeId = int | str


@dataclass(frozen=True)
class RecipeRef:
    """Provenance: the recipe a mention came from."""

    id: RecipeId
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title}


@dataclass(frozen=True)
class IngredientMention:
    """One raw ingredient line as written in one recipe."""

    raw_text: str
    recipe_id: RecipeId
    recipe_title: str

    @property
    def recipe(self) -> RecipeRef:
        return RecipeRef(self.recipe_id, self.recipe_title)


@dataclass(frozen=True)
class MergedIngredient:
    """All mentions that share one normalized key."""

    key: str
    name: str
    amounts: tuple[str, ...] = ()
    # amount_sources[i] is the recipe amounts[i] came from
    amount_sources: tuple[RecipeRef, ...] = ()
    combined_amount: str | None = None
    # One entry per contributing mention, in mention order
    recipes: tuple[RecipeRef, ...] = ()
    category: GroceryCategory | None = None

    @property
    def display_amount(self) -> str | None:
        """Combined amount when known, otherwise the amounts joined with '+'."""
        if self.combined_amount:
            return self.combined_amount
        if self.amounts:
            return " + ".join(self.amounts)
        return None

    @property
    def recipe_titles(self) -> list[str]:
        """Distinct recipe titles, first-seen order."""
        titles: list[str] = []
        for ref in self.recipes:
            if ref.title not in titles:
                titles.append(ref.title)
        return titles

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "name": self.name,
            "category": self.category,
            "amounts": list(self.amounts),
            "amountSources": [ref.to_dict() for ref in self.amount_sources],
            "combinedAmount": self.combined_amount,
            "recipes": [ref.to_dict() for ref in self.recipes],
        }

    def __str__(self) -> str:
        amount = self.display_amount
        return f"{self.name} ({amount})" if amount else self.name


@dataclass
class _Group:
    key: str
    mentions: list[IngredientMention] = field(default_factory=list)


def flatten_mentions(recipes: Iterable[RecipeIngredients]) -> list[IngredientMention]:
    """Flatten recipes into mentions, keeping recipe and ingredient order."""
    mentions: list[IngredientMention] = []
    for recipe in recipes:
        for raw_text in recipe.ingredients:
            mentions.append(IngredientMention(raw_text, recipe.recipe_id, recipe.recipe_title))
    return mentions


def _build_merged(group: _Group) -> MergedIngredient:
    amounts: list[str] = []
    amount_sources: list[RecipeRef] = []

    for mention in group.mentions:
        amount, _rest = split_amount(mention.raw_text)
        if amount is not None:
            amounts.append(amount)
            amount_sources.append(mention.recipe)

    return MergedIngredient(
        key=group.key,
        name=clean_display_name(group.mentions[0].raw_text),
        amounts=tuple(amounts),
        amount_sources=tuple(amount_sources),
        combined_amount=combine_amounts(amounts),
        recipes=tuple(mention.recipe for mention in group.mentions),
    )


def merge_mentions(mentions: Sequence[IngredientMention]) -> list[MergedIngredient]:
    """
    Group mentions by normalized key.

    Groups are emitted in the order their key first appears. Mentions with
    blank text (or no text at all) are skipped.
    """
    groups: dict[str, _Group] = {}
    skipped = 0

    for mention in mentions:
        key = normalize(mention.raw_text)
        if not key:
            skipped += 1
            continue
        if key not in groups:
            groups[key] = _Group(key=key)
        groups[key].mentions.append(mention)

    if skipped:
        logger.debug(f"Skipped {skipped} blank ingredient mention(s)")

    return [_build_merged(group) for group in groups.values()]


def merge_ingredients(recipes: Iterable[RecipeIngredients]) -> list[MergedIngredient]:
    """
    Merge the ingredient lists of several recipes.

    Args:
        recipes: Recipes in the order they should be read

    Returns:
        One MergedIngredient per distinct normalized key, uncategorized
    """
    mentions = flatten_mentions(recipes)
    merged = merge_mentions(mentions)
    logger.debug(f"Merged {len(mentions)} mention(s) into {len(merged)} ingredient(s)")
    return merged
