"""
Variant (modifier chain) classification for utility classes
"""

from enum import IntEnum

VARIANT_SEPARATOR = ":"

MEDIA_VARIANTS = frozenset({"dark"})

# Fixed escalating order, index is the breakpoint rank
RESPONSIVE_BREAKPOINTS = ("sm", "md", "lg", "xl", "2xl")

STATE_VARIANTS = frozenset(
    {
        "hover",
        "focus",
        "active",
        "disabled",
        "visited",
        "checked",
        "group-hover",
        "focus-within",
        "focus-visible",
    }
)

NO_BREAKPOINT = 999


class VariantClass(IntEnum):
    """Precedence of a modifier chain, lower sorts first."""

    PLAIN = 0  # no recognized variant
    STATE = 1  # hover:
    RESPONSIVE = 2  # lg:, lg:hover:
    MEDIA = 3  # dark:
    MEDIA_STATE = 4  # dark:hover:
    MEDIA_RESPONSIVE = 5  # dark:lg:, dark:lg:hover:


def split_variants(token: str) -> tuple[list[str], str]:
    """Split a class into its modifier chain and base utility"""
    parts = token.split(VARIANT_SEPARATOR)
    return parts[:-1], parts[-1]


def breakpoint_rank(chain: list[str]) -> int:
    """Position of the first recognized breakpoint in the chain"""
    for variant in chain:
        if variant in RESPONSIVE_BREAKPOINTS:
            return RESPONSIVE_BREAKPOINTS.index(variant)
    return NO_BREAKPOINT


def classify(chain: list[str]) -> tuple[VariantClass, int]:
    """Classify a modifier chain.

    Unrecognized variants are ignored, so ``group-focus:lg:p-4`` is
    classified by ``lg`` alone.

    Returns:
        Tuple of the variant class and the breakpoint rank. The rank is
        only meaningful for RESPONSIVE and MEDIA_RESPONSIVE chains and is
        0 for every other class.
    """
    if not chain:
        return VariantClass.PLAIN, 0

    has_media = False
    has_responsive = False
    has_state = False

    for variant in chain:
        if variant in MEDIA_VARIANTS:
            has_media = True
        elif variant in RESPONSIVE_BREAKPOINTS:
            has_responsive = True
        elif variant in STATE_VARIANTS:
            has_state = True

    if has_media and has_responsive:
        variant_class = VariantClass.MEDIA_RESPONSIVE
    elif has_media and has_state:
        variant_class = VariantClass.MEDIA_STATE
    elif has_media:
        variant_class = VariantClass.MEDIA
    elif has_responsive:
        variant_class = VariantClass.RESPONSIVE
    elif has_state:
        variant_class = VariantClass.STATE
    else:
        variant_class = VariantClass.PLAIN

    if variant_class in (VariantClass.RESPONSIVE, VariantClass.MEDIA_RESPONSIVE):
        return variant_class, breakpoint_rank(chain)
    return variant_class, 0
