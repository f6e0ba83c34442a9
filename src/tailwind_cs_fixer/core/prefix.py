"""
Canonical prefix and numeric value extraction for utility classes
"""

import re

SEPARATOR = "-"

# Second parts that make a directional compound (border-t, rounded-tr, ...)
DIRECTIONAL_SUFFIXES = frozenset(
    {
        "t",
        "r",
        "b",
        "l",
        "x",
        "y",
        "s",
        "e",
        "tl",
        "tr",
        "bl",
        "br",
        "ss",
        "se",
        "es",
        "ee",
    }
)

GRID_COMPOUNDS = frozenset({"cols", "rows", "flow"})
AUTO_COMPOUNDS = frozenset({"cols", "rows"})
FLEX_COMPOUNDS = frozenset(
    {"row", "col", "wrap", "grow", "shrink", "none", "initial", "auto"}
)

_MIN_MAX_SIZE_RE = re.compile(r"^(min|max)-(w|h)$")
_NUMERIC_SUFFIX_RE = re.compile(r"-(\d+(?:\.\d+)?)(?:/(\d+))?$")


def canonicalize(base_utility: str) -> str:
    """Derive the category prefix of a utility class without variants.

    Examples:
        w-[42px]      -> w
        max-w-[50%]   -> max-w
        border-t-2    -> border-t
        divide-x      -> divide
        flex-col      -> flex-col
        bg-blue-500   -> bg
    """
    # Arbitrary values like w-[42px] or bg-[#1da1f2]
    if "[" in base_utility:
        before_bracket = base_utility[: base_utility.index("[")]
        if before_bracket.endswith(SEPARATOR):
            before_bracket = before_bracket[:-1]

        match = _MIN_MAX_SIZE_RE.match(before_bracket)
        if match:
            return f"{match.group(1)}-{match.group(2)}"

        if SEPARATOR in before_bracket:
            return before_bracket[: before_bracket.rindex(SEPARATOR)]
        return before_bracket

    # Bare keyword (flex, hidden, container)
    if SEPARATOR not in base_utility:
        return base_utility

    parts = base_utility.split(SEPARATOR)
    first, second = parts[0], parts[1]

    if first in ("min", "max") and second in ("w", "h"):
        return f"{first}-{second}"

    # divide-x/divide-y stay under "divide" for the divide sub-order
    if first != "divide" and second in DIRECTIONAL_SUFFIXES:
        return f"{first}-{second}"

    if first == "grid" and second in GRID_COMPOUNDS:
        return f"{first}-{second}"

    if first == "auto" and second in AUTO_COMPOUNDS:
        return f"{first}-{second}"

    if first == "flex" and second in FLEX_COMPOUNDS:
        return f"{first}-{second}"

    if first == "pointer" and second == "events":
        return "pointer-events"

    return first


def extract_numeric_value(token: str) -> float | None:
    """Return the trailing numeric value of a class (p-4 -> 4, w-1/2 -> 0.5).

    Variants do not change the result since only the end of the token is
    inspected.
    """
    base_utility = token.rsplit(":", 1)[-1]
    match = _NUMERIC_SUFFIX_RE.search(base_utility)
    if not match:
        return None

    value = float(match.group(1))
    if match.group(2) is not None:
        denominator = float(match.group(2))
        if denominator == 0:
            return None
        return value / denominator
    return value
