"""Pantry management: mark ingredients you already have."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from .logging_config import get_logger
from .normalizer import normalize

if TYPE_CHECKING:
    from .merger import MergedIngredient

logger = get_logger(__name__)

# Camp staples assumed to be packed already.
# User can expand via `camp-grocery pantry add`
DEFAULT_PANTRY_ITEMS: set[str] = {
    "water",
    "salt",
    "black pepper",
    "cooking oil",
    "vegetable oil",
    "olive oil",
}


@dataclass
class PantryConfig:
    """Configuration for pantry items."""

    user_items: set[str] = field(default_factory=set)
    excluded_defaults: set[str] = field(default_factory=set)
    updated_at: datetime | None = None

    @property
    def all_pantry_items(self) -> set[str]:
        """Get all active pantry items (defaults + user, minus excluded)."""
        return (DEFAULT_PANTRY_ITEMS - self.excluded_defaults) | self.user_items

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "version": 1,
            "user_items": sorted(self.user_items),
            "excluded_defaults": sorted(self.excluded_defaults),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PantryConfig:
        """Create from dict."""
        updated_at = None
        if data.get("updated_at"):
            updated_at = datetime.fromisoformat(data["updated_at"])

        return cls(
            user_items=set(data.get("user_items", [])),
            excluded_defaults=set(data.get("excluded_defaults", [])),
            updated_at=updated_at,
        )


@dataclass(frozen=True)
class ConfirmedIngredient:
    """A merged ingredient plus whether it still has to be bought."""

    ingredient: MergedIngredient
    is_needed: bool = True

    @property
    def name(self) -> str:
        return self.ingredient.name

    def toggled(self) -> ConfirmedIngredient:
        return ConfirmedIngredient(self.ingredient, not self.is_needed)


def load_pantry_config(pantry_file: Path) -> PantryConfig:
    """Load pantry configuration from disk."""
    if not pantry_file.exists():
        return PantryConfig()

    try:
        with open(pantry_file) as f:
            data = json.load(f)
        return PantryConfig.from_dict(data)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.warning(f"Ignoring unreadable pantry file {pantry_file}: {e}")
        return PantryConfig()


def save_pantry_config(config: PantryConfig, pantry_file: Path) -> None:
    """Save pantry configuration to disk."""
    config.updated_at = datetime.now()
    pantry_file.parent.mkdir(parents=True, exist_ok=True)
    with open(pantry_file, "w") as f:
        json.dump(config.to_dict(), f, indent=2)


def _normalize_for_storage(name: str) -> str:
    return " ".join(name.lower().split())


def already_have_keys(items: Iterable[str]) -> set[str]:
    """
    Build the lookup set for "already have" entries.

    Entries may be raw ingredient text ("2 tbsp Olive Oil") or keys that
    were normalized earlier ("olive oil"); both forms are accepted.
    """
    keys: set[str] = set()
    for item in items:
        if not isinstance(item, str):
            continue
        keys.add(_normalize_for_storage(item))
        keys.add(normalize(item))
    keys.discard("")
    return keys


def reconcile(
    merged: Iterable[MergedIngredient],
    already_have: Iterable[str] = (),
    config: PantryConfig | None = None,
) -> list[ConfirmedIngredient]:
    """
    Mark merged ingredients the user already has.

    Args:
        merged: Merged ingredients
        already_have: Raw texts or normalized keys of items already on hand
        config: Optional pantry configuration; its items count as already had

    Returns:
        One ConfirmedIngredient per merged ingredient, same order
    """
    items = list(already_have)
    if config is not None:
        items.extend(config.all_pantry_items)
    keys = already_have_keys(items)

    confirmed = [ConfirmedIngredient(ing, is_needed=ing.key not in keys) for ing in merged]
    owned = sum(1 for c in confirmed if not c.is_needed)
    if owned:
        logger.debug(f"{owned} ingredient(s) marked as already have")
    return confirmed


def add_to_pantry(
    items: list[str],
    pantry_file: Path,
) -> PantryConfig:
    """Add items to user's pantry."""
    config = load_pantry_config(pantry_file)
    for item in items:
        normalized = _normalize_for_storage(item)
        config.user_items.add(normalized)
        # Remove from excluded if it was there
        config.excluded_defaults.discard(normalized)
    save_pantry_config(config, pantry_file)
    return config


def remove_from_pantry(
    items: list[str],
    pantry_file: Path,
) -> PantryConfig:
    """Remove items from user's pantry."""
    config = load_pantry_config(pantry_file)
    for item in items:
        normalized = _normalize_for_storage(item)
        config.user_items.discard(normalized)
        # If it's a default item, add to excluded
        if normalized in DEFAULT_PANTRY_ITEMS:
            config.excluded_defaults.add(normalized)
    save_pantry_config(config, pantry_file)
    return config


def clear_pantry(pantry_file: Path) -> None:
    """Clear all pantry customizations."""
    save_pantry_config(PantryConfig(), pantry_file)


def get_default_pantry_items() -> list[str]:
    """Get sorted list of default pantry items."""
    return sorted(DEFAULT_PANTRY_ITEMS)
