"""
Tailwind class sorter.

Sorts the classes of a class attribute into the order used by Tailwind's
official Prettier plugin. A class is compared by, in order:

1. its variant class (plain < state < responsive < dark < dark+state <
   dark+responsive),
2. its breakpoint (sm < md < lg < xl < 2xl) for responsive variants,
3. its category rank,
4. a category specific sub-order (text, bg, shadow, divide, animate),
5. its trailing numeric value (p-2 < p-4, w-1/4 < w-1/2),
6. its text.
"""

import re
from functools import cmp_to_key

from tailwind_cs_fixer.core.order_rules import RANK_EPSILON, UNKNOWN_RANK, OrderIndex
from tailwind_cs_fixer.core.prefix import canonicalize, extract_numeric_value
from tailwind_cs_fixer.core.sub_order import (
    get_sub_order_resolver,
    text_sub_order,
)
from tailwind_cs_fixer.core.variants import VariantClass, classify, split_variants

_WHITESPACE_RE = re.compile(r"\s+")

# Scale of the text sub-order folded into the text rank
TEXT_SUB_ORDER_STEP = 0.01


def _compare_values(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


class TailwindClassSorter:
    """Stateless sorter, safe to share between threads once built."""

    def __init__(self, order_index: OrderIndex | None = None):
        self.order_index = order_index or OrderIndex()

    def sort(self, classes: str) -> str:
        """Sort a whitespace separated class string.

        Whitespace is normalized to single spaces; empty input gives an
        empty string.
        """
        classes = _WHITESPACE_RE.sub(" ", classes).strip()
        if not classes:
            return ""
        return " ".join(self.sort_tokens(classes.split(" ")))

    def sort_tokens(self, tokens: list[str]) -> list[str]:
        """Stable sort of a list of classes"""
        return sorted((t for t in tokens if t), key=cmp_to_key(self.compare))

    def rank(self, base_utility: str) -> float:
        """Category rank of a class without variants.

        An exact entry of the order table wins over the canonical prefix.
        Text classes carry their sub-order as a fraction so that leading
        and font fall between text size and text color.
        """
        exact = self.order_index.rank_of(base_utility)
        if exact is not None:
            return exact

        prefix = canonicalize(base_utility)
        rank = self.order_index.rank_of(prefix)
        if rank is None:
            return UNKNOWN_RANK

        if prefix == "text":
            return rank + text_sub_order(base_utility) * TEXT_SUB_ORDER_STEP
        return rank

    def compare(self, a: str, b: str) -> int:
        """Compare two classes, negative when ``a`` sorts first"""
        chain_a, base_a = split_variants(a)
        chain_b, base_b = split_variants(b)

        variant_a, breakpoint_a = classify(chain_a)
        variant_b, breakpoint_b = classify(chain_b)

        if variant_a != variant_b:
            return _compare_values(variant_a, variant_b)

        if variant_a in (VariantClass.RESPONSIVE, VariantClass.MEDIA_RESPONSIVE):
            if breakpoint_a != breakpoint_b:
                return _compare_values(breakpoint_a, breakpoint_b)

        diff = self.rank(base_a) - self.rank(base_b)
        if abs(diff) > RANK_EPSILON:
            return 1 if diff > 0 else -1

        return self._compare_within_category(a, base_a, b, base_b)

    def _compare_within_category(self, a: str, base_a: str, b: str, base_b: str) -> int:
        prefix = canonicalize(base_a)
        if prefix == canonicalize(base_b):
            resolver = get_sub_order_resolver(prefix)
            if resolver is not None:
                result = resolver.compare(base_a, base_b)
                if result:
                    return result

        # Numbers only break ties when both classes carry one, so a category
        # mixing numeric and named values (max-w-3, max-w-10, max-w-2xl) is
        # not totally ordered and its output depends on the input order.
        value_a = extract_numeric_value(a)
        value_b = extract_numeric_value(b)
        if value_a is not None and value_b is not None and value_a != value_b:
            return _compare_values(value_a, value_b)

        return _compare_values(a, b)
