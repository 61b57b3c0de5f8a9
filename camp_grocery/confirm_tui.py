"""Interactive TUI for confirming which ingredients still need buying."""

from __future__ import annotations

from dataclasses import dataclass, field

import click
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Footer, Header, Label, Static

from .pantry import ConfirmedIngredient


@dataclass
class ConfirmationResult:
    """Result from the confirmation step."""

    confirmed: bool
    ingredients: list[ConfirmedIngredient] = field(default_factory=list)
    # State before review
    initial: list[ConfirmedIngredient] = field(default_factory=list)

    @property
    def newly_owned(self) -> list[str]:
        """Names switched from needed to already have during review."""
        was_needed = {c.ingredient.key for c in self.initial if c.is_needed}
        return [
            c.name for c in self.ingredients if not c.is_needed and c.ingredient.key in was_needed
        ]


class ConfirmScreen(App[ConfirmationResult]):
    """Toggle each merged ingredient between needed and already have."""

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        height: 100%;
        padding: 1;
    }

    #header-info {
        height: auto;
        padding: 1;
        background: $primary-background;
        color: $text;
    }

    #header-title {
        text-style: bold;
        padding-bottom: 1;
    }

    #header-desc {
        color: $text-muted;
    }

    #items-table {
        height: 1fr;
        margin: 1 0;
    }

    #summary {
        height: 3;
        padding: 0 1;
        background: $surface-darken-1;
        content-align: center middle;
    }

    #button-bar {
        height: 3;
        align: center middle;
        padding: 0 1;
    }

    #button-bar Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("space", "toggle_item", "Toggle"),
        Binding("a", "need_all", "Need All"),
        Binding("enter", "confirm", "Confirm"),
        Binding("q", "quit_cancel", "Cancel"),
        Binding("escape", "quit_cancel", "Cancel"),
    ]

    def __init__(
        self,
        ingredients: list[ConfirmedIngredient],
        title: str | None = None,
    ) -> None:
        super().__init__()
        self.ingredients = list(ingredients)
        self.initial = list(ingredients)
        self.screen_title = title or "Review Grocery List"

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main-container"):
            with Vertical(id="header-info"):
                yield Label("Review and adjust your grocery list.", id="header-title")
                yield Label("Uncheck items you already have.", id="header-desc")
            table = DataTable(id="items-table")
            table.cursor_type = "row"
            table.add_columns("", "Item", "Amount", "Category", "Recipes")
            yield table
            yield Static(self._get_summary(), id="summary")
            with Horizontal(id="button-bar"):
                yield Button("Confirm (enter)", variant="success", id="btn-confirm")
                yield Button("Cancel (q)", variant="error", id="btn-cancel")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.screen_title
        self._refresh_table()

    def _get_summary(self) -> str:
        needed = sum(1 for c in self.ingredients if c.is_needed)
        owned = len(self.ingredients) - needed
        return f"Buying: {needed} | Already have: {owned}"

    def _refresh_table(self) -> None:
        table = self.query_one("#items-table", DataTable)
        table.clear()

        for confirmed in self.ingredients:
            ingredient = confirmed.ingredient
            table.add_row(
                "[x]" if confirmed.is_needed else "[ ]",
                ingredient.name,
                ingredient.display_amount or "",
                ingredient.category or "",
                ", ".join(ingredient.recipe_titles),
            )

        summary = self.query_one("#summary", Static)
        summary.update(self._get_summary())

    def toggle(self, index: int) -> None:
        if 0 <= index < len(self.ingredients):
            self.ingredients[index] = self.ingredients[index].toggled()

    def action_toggle_item(self) -> None:
        table = self.query_one("#items-table", DataTable)
        row_idx = table.cursor_row
        if row_idx is not None and 0 <= row_idx < len(self.ingredients):
            self.toggle(row_idx)
            self._refresh_table()
            # Keep cursor on same row
            table.move_cursor(row=row_idx)

    def action_need_all(self) -> None:
        self.ingredients = [ConfirmedIngredient(c.ingredient, True) for c in self.ingredients]
        self._refresh_table()

    def action_confirm(self) -> None:
        self.exit(
            ConfirmationResult(
                confirmed=True, ingredients=list(self.ingredients), initial=self.initial
            )
        )

    def action_quit_cancel(self) -> None:
        self.exit(ConfirmationResult(confirmed=False))

    @on(DataTable.RowSelected)
    def on_row_selected(self, event: DataTable.RowSelected) -> None:
        self.action_toggle_item()

    @on(Button.Pressed, "#btn-confirm")
    def on_confirm_button(self) -> None:
        self.action_confirm()

    @on(Button.Pressed, "#btn-cancel")
    def on_cancel_button(self) -> None:
        self.action_quit_cancel()


def interactive_confirm(
    ingredients: list[ConfirmedIngredient],
    title: str | None = None,
) -> ConfirmationResult:
    """
    Launch the TUI for the confirmation step.

    Args:
        ingredients: Reconciled ingredients
        title: Optional title for the screen

    Returns:
        ConfirmationResult with the adjusted ingredients
    """
    if not ingredients:
        return ConfirmationResult(confirmed=True)

    result = ConfirmScreen(ingredients, title).run()

    # Handle case where app exits without explicit result
    if result is None:
        return ConfirmationResult(confirmed=False)
    return result


def parse_toggle_response(response: str, count: int) -> set[int] | None:
    """
    Parse a comma-separated list of 1-based item numbers.

    Returns:
        Zero-based indices, or None if the input is not a number list
    """
    response = response.strip()
    if not response:
        return set()
    try:
        indices = {int(x.strip()) - 1 for x in response.split(",") if x.strip()}
    except ValueError:
        return None
    return {i for i in indices if 0 <= i < count}


def simple_confirm_prompt(ingredients: list[ConfirmedIngredient]) -> ConfirmationResult:
    """
    Plain prompt fallback for the confirmation step.

    Args:
        ingredients: Reconciled ingredients

    Returns:
        ConfirmationResult with the selected items toggled
    """
    if not ingredients:
        return ConfirmationResult(confirmed=True)

    click.echo()
    click.echo("=" * 50)
    click.echo("REVIEW GROCERY LIST")
    click.echo("=" * 50)
    click.echo("[x] = buy, [ ] = already have")
    click.echo()

    for i, confirmed in enumerate(ingredients, 1):
        box = "[x]" if confirmed.is_needed else "[ ]"
        amount = confirmed.ingredient.display_amount
        amount_str = f" ({amount})" if amount else ""
        click.echo(f"  {i}. {box} {confirmed.name}{amount_str}")

    click.echo()
    response = click.prompt(
        "Numbers to toggle (e.g., '1,3,5' or Enter to keep)",
        default="",
        show_default=False,
    )

    indices = parse_toggle_response(response, len(ingredients))
    if indices is None:
        click.echo("Invalid input. Keeping the list as shown.")
        indices = set()

    adjusted = [c.toggled() if i in indices else c for i, c in enumerate(ingredients)]
    return ConfirmationResult(confirmed=True, ingredients=adjusted, initial=list(ingredients))
