"""CLI entry point for Camp Grocery."""

import click

from . import __version__
from .categorizer import categorize
from .config import LOG_LEVEL, PANTRY_FILE
from .confirm_tui import interactive_confirm, simple_confirm_prompt
from .exceptions import CampGroceryError
from .export import export_grocery_list
from .grocery_list import GroceryList, aggregate, finalize
from .logging_config import configure_logging
from .normalizer import normalize
from .pantry import (
    DEFAULT_PANTRY_ITEMS,
    add_to_pantry,
    clear_pantry,
    load_pantry_config,
    reconcile,
    remove_from_pantry,
)
from .recipes import RecipeIngredients, load_recipes, parse_recipe_text, parse_recipe_url


def display_grocery_list(grocery_list: GroceryList) -> None:
    """Display a grocery list grouped by category."""
    click.echo()
    click.echo("=" * 60)
    click.echo("GROCERY LIST")
    click.echo("=" * 60)

    if grocery_list.recipe_titles:
        click.echo("Recipes: " + ", ".join(grocery_list.recipe_titles))

    for category, items in grocery_list.grouped.items():
        if not items:
            continue
        click.echo(f"\n{category}")
        for item in items:
            box = "[x]" if item.checked else "[ ]"
            amount = f" ({item.amount})" if item.amount else ""
            click.echo(f"  {box} {item.name}{amount}")

    click.echo()
    click.echo("-" * 60)
    click.echo(
        f"To buy: {len(grocery_list.needed)} | Already have: {len(grocery_list.already_have)}"
    )
    click.echo("-" * 60)


# ============================================================================
# Main CLI Group
# ============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="camp-grocery")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Camp Grocery - build one grocery list for a camping trip.

    Merge the ingredients of several recipes, drop what you already
    packed, and group the rest by store aisle.
    """
    configure_logging("DEBUG" if verbose else LOG_LEVEL)


# ============================================================================
# Grocery List Commands
# ============================================================================


@cli.command("build")
@click.argument("recipe_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--url", "-u", "urls", multiple=True, help="Import a recipe from a URL")
@click.option("--text", "-t", "input_text", help="Ingredients as text (newline or comma separated)")
@click.option("--title", default="Manual items", help="Recipe title for --text input")
@click.option("--have", "have", multiple=True, help="Something you already have")
@click.option(
    "--external-meal", "external_meals", multiple=True, help="Meal with no ingredient list"
)
@click.option("--no-pantry", is_flag=True, help="Ignore your saved pantry")
@click.option("--interactive", "-i", is_flag=True, help="Review the list in a TUI")
@click.option("--review", "-r", is_flag=True, help="Review the list with a simple prompt")
@click.option("--remember-pantry", is_flag=True, help="Save items you mark as owned to your pantry")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Export to file")
@click.option(
    "--format", "-f", "fmt", type=click.Choice(["json", "md", "txt"]), help="Export format"
)
def build_list(
    recipe_files: tuple[str, ...],
    urls: tuple[str, ...],
    input_text: str | None,
    title: str,
    have: tuple[str, ...],
    external_meals: tuple[str, ...],
    no_pantry: bool,
    interactive: bool,
    review: bool,
    remember_pantry: bool,
    output: str | None,
    fmt: str | None,
):
    """Build a grocery list from recipes.

    Examples:

    \b
        camp-grocery build trip.json
        camp-grocery build trip.json --have "olive oil" --have eggs
        camp-grocery build --url https://recipe.com/chili -o list.md
        camp-grocery build trip.json -o share.txt
        camp-grocery build --text "2 eggs, 1 lb bacon" --title Breakfast
    """
    recipes: list[RecipeIngredients] = []

    try:
        for path in recipe_files:
            recipes.extend(load_recipes(path))
    except CampGroceryError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    if urls:
        click.echo(f"Importing {len(urls)} recipe(s)...")
        for url in urls:
            try:
                recipe = parse_recipe_url(url)
                recipes.append(recipe)
                click.echo(f"  ✓ {recipe.recipe_title}")
            except Exception as e:
                click.echo(f"  ✗ Failed to import {url}: {e}", err=True)

    if input_text:
        # Handle comma-separated input
        if "," in input_text and "\n" not in input_text:
            input_text = input_text.replace(",", "\n")
        recipes.append(parse_recipe_text(title, input_text))

    if not recipes and not external_meals:
        click.echo("✗ No recipes provided. Use recipe files, --url or --text.", err=True)
        raise SystemExit(1)

    merged = aggregate(recipes)
    pantry_config = None if no_pantry else load_pantry_config(PANTRY_FILE)
    confirmed = reconcile(merged, have, pantry_config)

    if interactive or review:
        if interactive:
            result = interactive_confirm(confirmed)
        else:
            result = simple_confirm_prompt(confirmed)

        if not result.confirmed:
            click.echo("Cancelled.")
            return

        if result.ingredients:
            confirmed = result.ingredients

        if remember_pantry and result.newly_owned:
            add_to_pantry(result.newly_owned, PANTRY_FILE)
            click.echo(f"✓ Saved {len(result.newly_owned)} item(s) to your pantry")

    grocery_list = finalize(confirmed, external_meals, [r.recipe_title for r in recipes])

    if output:
        try:
            used = export_grocery_list(grocery_list, output, format=fmt)
        except (OSError, ValueError) as e:
            click.echo(f"✗ Export failed: {e}", err=True)
            raise SystemExit(1) from None
        click.echo(f"✓ Exported {len(grocery_list.items)} items to {output} ({used})")
    else:
        display_grocery_list(grocery_list)


@cli.command("normalize")
@click.argument("texts", nargs=-1, required=True)
def normalize_cmd(texts: tuple[str, ...]):
    """Show the matching key for ingredient lines.

    Lines with the same key are merged into one grocery item.
    """
    for text in texts:
        key = normalize(text)
        click.echo(f"{text!r} -> {key!r}")


@cli.command("categorize")
@click.argument("names", nargs=-1, required=True)
def categorize_cmd(names: tuple[str, ...]):
    """Show the grocery category for ingredient names."""
    for name in names:
        click.echo(f"{name}: {categorize(name)}")


# ============================================================================
# Pantry Commands
# ============================================================================


@cli.group()
def pantry():
    """Manage your pantry (things you always bring along).

    Pantry items are marked as "already have" when building a list. They
    stay on the list, checked off, so you can still see them.
    """
    pass


@pantry.command("list")
def pantry_list():
    """List your active pantry items."""
    config = load_pantry_config(PANTRY_FILE)
    items = config.all_pantry_items

    click.echo()
    click.echo("YOUR PANTRY")
    click.echo("=" * 50)

    if items:
        for item in sorted(items):
            marker = "" if item in DEFAULT_PANTRY_ITEMS else " (added)"
            click.echo(f"  {item}{marker}")
    else:
        click.echo("  (empty)")

    click.echo()
    click.echo(f"Total: {len(items)} items")
    click.echo(f"File: {PANTRY_FILE}")
    click.echo()


@pantry.command("add")
@click.argument("items", nargs=-1, required=True)
def pantry_add(items: tuple[str, ...]):
    """Add items to your pantry.

    Examples:

        camp-grocery pantry add "hot sauce"

        camp-grocery pantry add "coffee" "sugar" "propane"
    """
    add_to_pantry(list(items), PANTRY_FILE)
    click.echo(f"✓ Added {len(items)} item(s) to pantry:")
    for item in items:
        click.echo(f"  • {item}")


@pantry.command("remove")
@click.argument("items", nargs=-1, required=True)
def pantry_remove(items: tuple[str, ...]):
    """Remove items from your pantry.

    Examples:

        camp-grocery pantry remove "olive oil"
    """
    remove_from_pantry(list(items), PANTRY_FILE)
    click.echo(f"✓ Removed {len(items)} item(s) from pantry:")
    for item in items:
        click.echo(f"  • {item}")


@pantry.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def pantry_clear(yes: bool):
    """Reset the pantry to the default items."""
    if not yes:
        if not click.confirm("Reset pantry to defaults?"):
            click.echo("Cancelled.")
            return

    clear_pantry(PANTRY_FILE)
    click.echo("✓ Pantry reset to defaults")


@pantry.command("defaults")
def pantry_defaults():
    """Show default pantry items."""
    click.echo()
    click.echo("DEFAULT PANTRY ITEMS")
    click.echo("=" * 50)
    click.echo(f"({len(DEFAULT_PANTRY_ITEMS)} items)")
    click.echo()

    for item in sorted(DEFAULT_PANTRY_ITEMS):
        click.echo(f"  • {item}")

    click.echo()


if __name__ == "__main__":
    cli()
