"""Amount parsing: leading quantity/unit grammar and best-effort summing."""

import math
import re
from collections.abc import Sequence

# (canonical, display plural, other spellings)
_UNIT_FAMILIES: list[tuple[str, str, tuple[str, ...]]] = [
    # Volume
    ("cup", "cups", ("c",)),
    ("tbsp", "tbsp", ("tablespoon", "tablespoons", "tbs", "tb")),
    ("tsp", "tsp", ("teaspoon", "teaspoons", "ts")),
    ("fl oz", "fl oz", ("fluid ounce", "fluid ounces")),
    ("ml", "ml", ("milliliter", "milliliters", "millilitre", "millilitres")),
    ("l", "l", ("liter", "liters", "litre", "litres")),
    ("pint", "pints", ("pt",)),
    ("quart", "quarts", ("qt",)),
    ("gallon", "gallons", ("gal",)),
    # Weight
    ("oz", "oz", ("ounce", "ounces")),
    ("lb", "lb", ("lbs", "pound", "pounds")),
    ("g", "g", ("gram", "grams")),
    ("kg", "kg", ("kilogram", "kilograms")),
    # Count
    ("can", "cans", ()),
    ("jar", "jars", ()),
    ("package", "packages", ("pkg", "pack", "packs")),
    ("bag", "bags", ()),
    ("box", "boxes", ()),
    ("bottle", "bottles", ()),
    ("clove", "cloves", ()),
    ("slice", "slices", ()),
    ("bunch", "bunches", ()),
    ("head", "heads", ()),
    ("stalk", "stalks", ()),
    ("sprig", "sprigs", ()),
    ("stick", "sticks", ()),
    ("piece", "pieces", ("pcs",)),
    ("pinch", "pinches", ()),
    ("dash", "dashes", ()),
    ("handful", "handfuls", ()),
]

# Every accepted spelling -> canonical unit
UNIT_ALIASES: dict[str, str] = {}
PLURAL_UNITS: dict[str, str] = {}
for _canonical, _plural, _others in _UNIT_FAMILIES:
    PLURAL_UNITS[_canonical] = _plural
    for _spelling in (_canonical, _plural, *_others):
        UNIT_ALIASES[_spelling] = _canonical

UNITS = frozenset(UNIT_ALIASES)

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

_FRACTION_CHARS = "".join(UNICODE_FRACTIONS)

# Order matters: mixed numbers and fractions before plain integers
_NUMBER = (
    rf"(?:\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?\s*[{_FRACTION_CHARS}]"
    rf"|\d+(?:\.\d+)?|\.\d+|[{_FRACTION_CHARS}])"
)
_QUANTITY = rf"{_NUMBER}(?:(?:\s*[-–]\s*|\s+to\s+){_NUMBER})?"
_UNIT = "|".join(re.escape(u) for u in sorted(UNITS, key=len, reverse=True))

AMOUNT_RE = re.compile(
    rf"^(?P<qty>{_QUANTITY})"
    r"(?:\s*(?P<paren>\([^)]*\)))?"
    rf"(?:\s*(?P<unit>{_UNIT})\.?(?![a-z]))?",
    re.IGNORECASE,
)

_RANGE_RE = re.compile(r"\s*[-–]\s*|\s+to\s+", re.IGNORECASE)


def split_amount(text: str) -> tuple[str | None, str]:
    """
    Split a leading quantity+unit phrase off an ingredient line.

    Examples:
        "2 cups flour, sifted" -> ("2 cups", "flour, sifted")
        "1 (14 oz) can beans" -> ("1 (14 oz) can", "beans")
        "salt to taste" -> (None, "salt to taste")

    A prefix that would leave nothing behind is not split off.

    Returns:
        Tuple of (amount or None, remaining_text)
    """
    stripped = text.strip()
    match = AMOUNT_RE.match(stripped)
    if not match:
        return None, stripped

    amount = stripped[: match.end()].strip()
    remaining = stripped[match.end() :].strip()
    if remaining.lower().startswith("of "):
        remaining = remaining[3:].strip()

    if not remaining:
        return None, stripped

    return amount, remaining


def _parse_number(text: str) -> float | None:
    if text[-1] in UNICODE_FRACTIONS:
        whole = text[:-1].strip()
        if not whole:
            return UNICODE_FRACTIONS[text[-1]]
        try:
            return float(whole) + UNICODE_FRACTIONS[text[-1]]
        except ValueError:
            return None

    parts = text.split()
    try:
        if len(parts) == 2 and "/" in parts[1]:
            numerator, denominator = parts[1].split("/")
            return float(parts[0]) + float(numerator) / float(denominator)
        if len(parts) == 1 and "/" in text:
            numerator, denominator = text.split("/")
            return float(numerator) / float(denominator)
        if len(parts) == 1:
            return float(text)
    except (ValueError, ZeroDivisionError):
        return None

    return None


def parse_number(text: str) -> float | None:
    """
    Parse a plain number or simple fraction.

    Accepts "2", "1.5", "1/2", "1 1/2", "½" and "1½". Ranges, numbers too
    large to represent and anything else return None.
    """
    text = text.strip()
    if not text:
        return None

    value = _parse_number(text)
    if value is None or not math.isfinite(value):
        return None
    return value


def parse_amount(amount: str) -> tuple[float | None, str | None]:
    """
    Parse an amount string produced by split_amount.

    Returns:
        Tuple of (value, canonical_unit). value is None for ranges or
        anything that is not a whole amount phrase.
    """
    stripped = amount.strip()
    match = AMOUNT_RE.match(stripped)
    if not match or match.end() != len(stripped):
        return None, None

    unit = match.group("unit")
    canonical = UNIT_ALIASES.get(unit.lower()) if unit else None

    qty = match.group("qty")
    if _RANGE_RE.search(qty.strip()):
        return None, canonical

    return parse_number(qty), canonical


def package_size(amount: str) -> str | None:
    """
    The parenthetical package size of an amount, if any.

    "1 (14 oz) can" -> "(14 oz)"
    """
    match = AMOUNT_RE.match(amount.strip())
    if not match or not match.group("paren"):
        return None
    return " ".join(match.group("paren").lower().split())


def format_quantity(quantity: float) -> str:
    """Format a quantity without trailing zeros."""
    if quantity == int(quantity):
        return str(int(quantity))
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def combine_amounts(amounts: Sequence[str]) -> str | None:
    """
    Sum amounts that share one unit and package size.

    Examples:
        ["2 cups", "1 cup"] -> "3 cups"
        ["2", "1"] -> "3"
        ["1 (14 oz) can", "1 (14 oz) can"] -> "2 (14 oz) cans"
        ["1 (14 oz) can", "1 (28 oz) can"] -> None
        ["1 lb", "2 cups"] -> None

    Returns:
        "<sum> <unit>" (or "<sum>" without a unit), or None when any amount
        is unparseable or the units differ.
    """
    if not amounts:
        return None

    total = 0.0
    units: set[tuple[str | None, str | None]] = set()
    for amount in amounts:
        value, unit = parse_amount(amount)
        if value is None:
            return None
        total += value
        units.add((unit, package_size(amount)))

    if len(units) != 1 or not math.isfinite(total):
        return None

    unit, size = units.pop()
    parts = [format_quantity(total)]
    if size:
        parts.append(size)
    if unit is not None:
        parts.append(PLURAL_UNITS[unit] if total > 1 else unit)
    return " ".join(parts)
