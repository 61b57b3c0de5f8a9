"""Ingredient text normalization.

Turns a raw ingredient line into a key used only for grouping, so that
"2 cups flour", "1 cup all-purpose flour, sifted" and "Flour (sifted)" all
land in the same bucket. The rules are deliberately simple heuristics; see
the plural folding notes below for the cases they get wrong.
"""

import re

from .units import split_amount

# Size/prep words dropped from the front of a name. Colour and variety words
# ("red", "green", "ground") are never listed here.
DESCRIPTORS: tuple[str, ...] = (
    "all-purpose",
    "all purpose",
    "extra-virgin",
    "extra virgin",
    "extra-large",
    "fresh",
    "freshly",
    "large",
    "medium",
    "small",
    "boneless",
    "skinless",
    "chopped",
    "diced",
    "minced",
    "sliced",
    "shredded",
    "grated",
    "softened",
    "melted",
)

_PAREN_RE = re.compile(r"\([^)]*\)")
_WHITESPACE_RE = re.compile(r"\s+")
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh", "o")

MIN_SINGULAR_LENGTH = 3


def _strip_descriptors(text: str) -> str:
    changed = True
    while changed:
        changed = False
        for descriptor in DESCRIPTORS:
            prefix = descriptor + " "
            if text.startswith(prefix) and text[len(prefix) :].strip():
                text = text[len(prefix) :].strip()
                changed = True
    return text


def fold_plural(word: str) -> str:
    """
    Fold a trailing plural suffix.

    "-es" is dropped after s/x/z/ch/sh/o stems ("tomatoes", "peaches"),
    otherwise a bare "-s" is dropped ("eggs", "apples"). Nothing is folded
    when the result would be shorter than three characters.

    This is a heuristic, not a dictionary: "hummus" becomes "hummu" and
    "berries" becomes "berrie".
    """
    if word.endswith("es"):
        stem = word[:-2]
        if len(stem) >= MIN_SINGULAR_LENGTH and stem.endswith(_SIBILANT_ENDINGS):
            return stem
    if word.endswith("s"):
        stem = word[:-1]
        if len(stem) >= MIN_SINGULAR_LENGTH:
            return stem
    return word


def normalize(raw_text: str) -> str:
    """
    Compute the grouping key for a raw ingredient line.

    Steps: lower-case, drop a leading quantity/unit, drop parenthetical
    asides and everything after the first comma, collapse whitespace, drop
    leading size/prep descriptors, fold a plural on the last word.

    Never raises. Blank (or non-string) input yields "".
    """
    if not isinstance(raw_text, str):
        return ""

    text = raw_text.lower().strip()
    if not text:
        return ""

    _amount, text = split_amount(text)

    text = _PAREN_RE.sub(" ", text)
    # Unclosed parenthesis: drop the tail
    text = text.split("(", 1)[0]
    text = text.split(",", 1)[0]

    text = _WHITESPACE_RE.sub(" ", text).strip().strip(".;:").strip()
    if not text:
        return ""

    text = _strip_descriptors(text)

    head, _, last = text.rpartition(" ")
    last = fold_plural(last)
    return f"{head} {last}" if head else last


def clean_display_name(raw_text: str) -> str:
    """
    Cosmetic cleanup for showing a mention to the user.

    Drops the leading amount (amounts are shown separately), trims and
    capitalizes the first letter. The rest of the wording is kept as typed.
    """
    _amount, name = split_amount(raw_text)
    name = _WHITESPACE_RE.sub(" ", name).strip()
    if not name:
        name = raw_text.strip()
    return name[:1].upper() + name[1:]
