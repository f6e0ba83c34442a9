"""
Sub-order rules refining the order of classes inside one category.

Each resolver maps a base utility to a sort key. Two classes sharing a
canonical prefix are ordered by their keys; equal keys fall through to the
numeric and lexicographic tie-breaks of the sorter.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

_TEXT_ALIGNMENT_RE = re.compile(r"^text-(left|center|right|justify|start|end)$")
_TEXT_SIZE_RE = re.compile(
    r"^text-(xs|sm|base|lg|xl|2xl|3xl|4xl|5xl|6xl|7xl|8xl|9xl)$"
)
_BG_COLOR_RE = re.compile(
    r"^bg-(slate|gray|zinc|neutral|stone|red|orange|amber|yellow|lime|green"
    r"|emerald|teal|cyan|sky|blue|indigo|violet|purple|fuchsia|pink|rose"
    r"|white|black|transparent|current|inherit)-"
)
_DIVIDE_DIRECTION_RE = re.compile(r"^divide-[xy]$")
_DIVIDE_STYLE_RE = re.compile(r"^divide-(solid|dashed|dotted|double|none)$")

SHADOW_SIZES = {
    "shadow-none": 0,
    "shadow-sm": 1,
    "shadow": 2,
    "shadow-md": 3,
    "shadow-lg": 4,
    "shadow-xl": 5,
    "shadow-2xl": 6,
    "shadow-inner": 7,
}
SHADOW_OTHER = 8


def text_sub_order(base_utility: str) -> int:
    """alignment(0), size(1), opacity(3), color(4).

    Leading and font sit at 1.5 and 2.5 through their own ranks.
    """
    if _TEXT_ALIGNMENT_RE.match(base_utility):
        return 0
    if _TEXT_SIZE_RE.match(base_utility):
        return 1
    if base_utility.startswith("text-opacity-"):
        return 3
    return 4


def bg_sub_order(base_utility: str) -> int:
    """opacity(0), palette colors(1), everything else(2)"""
    if base_utility.startswith("bg-opacity-"):
        return 0
    if _BG_COLOR_RE.match(base_utility):
        return 1
    return 2


def shadow_sub_order(base_utility: str) -> int:
    return SHADOW_SIZES.get(base_utility, SHADOW_OTHER)


def divide_sub_order(base_utility: str) -> int:
    """direction/width(0), style(1), color(2)"""
    if _DIVIDE_DIRECTION_RE.match(base_utility):
        return 0
    if _DIVIDE_STYLE_RE.match(base_utility):
        return 1
    return 2


def animate_sub_order(base_utility: str) -> str:
    # Animations are ordered by name
    return base_utility


@dataclass(frozen=True)
class SubOrderResolver:
    """Sub-order rule for one canonical prefix."""

    prefix: str
    key: Callable[[str], Any]
    description: str = ""

    def compare(self, base_a: str, base_b: str) -> int:
        """Compare two base utilities of this category, 0 when tied"""
        key_a = self.key(base_a)
        key_b = self.key(base_b)
        if key_a == key_b:
            return 0
        return -1 if key_a < key_b else 1


def get_default_sub_order_resolvers() -> dict[str, SubOrderResolver]:
    """Get the default resolvers keyed by canonical prefix."""
    resolvers = [
        SubOrderResolver(
            prefix="text",
            key=text_sub_order,
            description="alignment, size, opacity, color",
        ),
        SubOrderResolver(
            prefix="bg",
            key=bg_sub_order,
            description="opacity, color, size/position/gradient",
        ),
        SubOrderResolver(
            prefix="shadow",
            key=shadow_sub_order,
            description="size ladder, then colors",
        ),
        SubOrderResolver(
            prefix="divide",
            key=divide_sub_order,
            description="direction, style, color",
        ),
        SubOrderResolver(
            prefix="animate",
            key=animate_sub_order,
            description="alphabetical",
        ),
    ]
    return {resolver.prefix: resolver for resolver in resolvers}


DEFAULT_SUB_ORDER_RESOLVERS = MappingProxyType(get_default_sub_order_resolvers())


def get_sub_order_resolver(prefix: str) -> SubOrderResolver | None:
    """Resolver registered for a canonical prefix, None when there is none"""
    return DEFAULT_SUB_ORDER_RESOLVERS.get(prefix)
