"""Grocery list export in various formats."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from .grocery_list import GroceryList


def export_to_json(
    grocery_list: GroceryList,
    filepath: str | Path,
    *,
    title: str | None = None,
) -> None:
    """
    Export grocery list to JSON format.

    Args:
        grocery_list: The list to export
        filepath: Output file path
        title: Optional list title
    """
    data: dict[str, Any] = {
        "exported_at": datetime.now().isoformat(),
        "title": title,
        **grocery_list.to_dict(),
        "summary": {
            "total_items": len(grocery_list.items),
            "needed": len(grocery_list.needed),
            "already_have": len(grocery_list.already_have),
        },
    }

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def render_markdown(grocery_list: GroceryList, *, title: str | None = None) -> str:
    """Render a grocery list as Markdown, grouped by category."""
    lines: list[str] = []

    lines.append(f"# {title or 'Grocery List'}")
    lines.append("")
    lines.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
    lines.append("")

    if grocery_list.recipe_titles:
        lines.append("**Recipes:** " + ", ".join(grocery_list.recipe_titles))
        lines.append("")

    for category, items in grocery_list.grouped.items():
        if not items:
            continue
        lines.append(f"## {category}")
        lines.append("")
        for item in items:
            box = "[x]" if item.checked else "[ ]"
            amount = f" ({item.amount})" if item.amount else ""
            lines.append(f"- {box} {item.name}{amount}")
        lines.append("")

    lines.append(
        f"*{len(grocery_list.needed)} to buy, {len(grocery_list.already_have)} already packed*"
    )
    lines.append("")
    return "\n".join(lines)


def export_to_markdown(
    grocery_list: GroceryList,
    filepath: str | Path,
    *,
    title: str | None = None,
) -> None:
    """Export grocery list to Markdown format."""
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_markdown(grocery_list, title=title))


SHARE_HEADER = "THE CAMPING PLANNER - GROCERY LIST"


def render_share_text(grocery_list: GroceryList) -> str:
    """
    Render the items still to buy as plain text for a message or email.

    Checked items are left out. Categories with nothing to buy are skipped.
    """
    lines = [SHARE_HEADER, ""]

    needed = GroceryList(items=grocery_list.needed)
    for category, items in needed.grouped.items():
        if not items:
            continue
        lines.append(category.upper())
        lines.extend(f"  • {item.name}" for item in items)
        lines.append("")

    return "\n".join(lines) + "\n"


def export_to_text(grocery_list: GroceryList, filepath: str | Path) -> None:
    """Export the share text to a file."""
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_share_text(grocery_list))


def export_grocery_list(
    grocery_list: GroceryList,
    filepath: str | Path,
    *,
    title: str | None = None,
    format: str | None = None,
) -> str:
    """
    Export grocery list to file.

    Format is auto-detected from file extension if not specified.

    Args:
        grocery_list: The list to export
        filepath: Output file path
        title: Optional list title
        format: Output format (json, md, txt) - auto-detected if None

    Returns:
        The format used for export
    """
    path = Path(filepath)

    # Auto-detect format from extension
    if format is None:
        ext = path.suffix.lower()
        format_map = {
            ".json": "json",
            ".md": "md",
            ".markdown": "md",
            ".txt": "txt",
        }
        format = format_map.get(ext, "md")

    if format == "json":
        export_to_json(grocery_list, filepath, title=title)
    elif format in ("md", "markdown"):
        export_to_markdown(grocery_list, filepath, title=title)
    elif format == "txt":
        export_to_text(grocery_list, filepath)
    else:
        raise ValueError(f"Unsupported format: {format}")

    return format
