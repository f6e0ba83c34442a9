"""
Category order table for Tailwind utility classes.

The order follows Tailwind's official Prettier plugin and the box model:
Layout -> Flexbox/Grid -> Spacing -> Sizing -> Typography -> Backgrounds ->
Borders -> Effects -> Transitions -> Transforms -> Interactivity.
"""

from types import MappingProxyType

# Unknown prefixes sort after every known category
UNKNOWN_RANK = 999999.0

# Rank differences below this are treated as equal
RANK_EPSILON = 0.0001

# Offsets of leading/font relative to the text category, see OrderIndex
LEADING_OFFSET = 0.015
FONT_OFFSET = 0.025

# ============================================================
# CLASS ORDER
# ============================================================

CLASS_ORDER = [
    # Container
    "container",
    # Box Sizing
    "box-border",
    "box-content",
    # Position (before display)
    "absolute",
    "fixed",
    "relative",
    "static",
    "sticky",
    "inset",
    "inset-x",
    "inset-y",
    "top",
    "right",
    "bottom",
    "left",
    # Visibility
    "visible",
    "invisible",
    "collapse",
    # Z-Index
    "z",
    # Margin (before display)
    "m",
    "mx",
    "my",
    "mt",
    "mr",
    "mb",
    "ml",
    # Display
    "block",
    "flex",
    "inline-flex",
    "grid",
    "inline-grid",
    "table",
    "table-row",
    "table-cell",
    "flow-root",
    "hidden",
    "inline",
    "inline-block",
    # Space Between (after display)
    "space-x",
    "space-y",
    # Overflow
    "overflow",
    "overflow-x",
    "overflow-y",
    # Sizing: height before width, base then max then min
    "h",
    "max-h",
    "min-h",
    "w",
    "max-w",
    "min-w",
    "size",
    # Flex Container
    "flex-row",
    "flex-row-reverse",
    "flex-col",
    "flex-col-reverse",
    "flex-wrap",
    "flex-wrap-reverse",
    "flex-nowrap",
    "flex-grow",
    "flex-shrink",
    "flex-none",
    "flex-initial",
    "flex-auto",
    # Grid Container
    "grid-flow",
    "grid-cols",
    "grid-rows",
    "auto-cols",
    "auto-rows",
    # Flex & Grid Item
    "place-content",
    "place-items",
    "place-self",
    "items-start",
    "items-end",
    "items-center",
    "items-baseline",
    "items-stretch",
    "content",
    "justify-items",
    "justify-self",
    "justify-start",
    "justify-end",
    "justify-center",
    "justify-between",
    "justify-around",
    "justify-evenly",
    "align-content",
    "align-items",
    "align-self",
    "order",
    # Gap
    "gap",
    "gap-x",
    "gap-y",
    # Borders: radius before width before color
    "rounded",
    "rounded-t",
    "rounded-r",
    "rounded-b",
    "rounded-l",
    "rounded-tl",
    "rounded-tr",
    "rounded-br",
    "rounded-bl",
    "rounded-s",
    "rounded-e",
    "border",
    "border-t",
    "border-r",
    "border-b",
    "border-l",
    "border-x",
    "border-y",
    "border-s",
    "border-e",
    "border-solid",
    "border-dashed",
    "border-dotted",
    "border-double",
    "border-none",
    "divide",  # divide-x, divide-y and colors share one category
    "outline",
    "outline-offset",
    "ring",
    "ring-inset",
    "ring-offset",
    # Backgrounds (opacity, colors, size/position share "bg")
    "bg",
    "from",
    "via",
    "to",
    # Padding
    "p",
    "px",
    "py",
    "pt",
    "pr",
    "pb",
    "pl",
    # Typography: text (alignment, size) -> leading -> font -> text (opacity, color)
    "text",
    "font",  # moved next to text by OrderIndex
    "font-variant-numeric",
    "leading",  # moved next to text by OrderIndex
    "tracking",
    "uppercase",
    "lowercase",
    "capitalize",
    "normal-case",
    "italic",
    "not-italic",
    "underline",
    "line-through",
    "no-underline",
    "overline",
    "decoration",
    "decoration-slice",
    "decoration-clone",
    "antialiased",
    "subpixel-antialiased",
    # Lists
    "list",
    "list-inside",
    "list-outside",
    # Whitespace
    "whitespace",
    "break",
    # Effects
    "shadow",
    "shadow-inner",
    "shadow-none",
    "opacity",
    "mix-blend",
    "bg-blend",
    # Filters
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue-rotate",
    "invert",
    "saturate",
    "sepia",
    "backdrop-blur",
    "backdrop-brightness",
    "backdrop-contrast",
    "backdrop-grayscale",
    "backdrop-hue-rotate",
    "backdrop-invert",
    "backdrop-opacity",
    "backdrop-saturate",
    "backdrop-sepia",
    # Tables
    "border-collapse",
    "border-separate",
    "table-auto",
    "table-fixed",
    # Transitions & Animation
    "transition",
    "transition-all",
    "transition-colors",
    "transition-opacity",
    "transition-shadow",
    "transition-transform",
    "transition-none",
    "delay",
    "duration",
    "ease",
    "ease-in",
    "ease-out",
    "ease-in-out",
    "ease-linear",
    "animate",
    # Transforms
    "transform",
    "transform-gpu",
    "transform-none",
    "scale",
    "scale-x",
    "scale-y",
    "rotate",
    "translate",
    "translate-x",
    "translate-y",
    "skew",
    "skew-x",
    "skew-y",
    "origin",
    # Interactivity
    "cursor",
    "pointer-events",
    "resize",
    "scroll",
    "select",
    "appearance",
    # SVG
    "fill",
    "stroke",
    # Accessibility
    "sr",
]


class OrderIndex:
    """Read-only mapping from category keyword to its rank.

    Ranks are the keyword positions in ``CLASS_ORDER``. ``leading`` and
    ``font`` are re-ranked to sit just after the text category so they
    interleave with the text sub-order (alignment and size first, opacity
    and color last).
    """

    def __init__(self, class_order: list[str] | None = None):
        order = CLASS_ORDER if class_order is None else class_order

        ranks: dict[str, float] = {}
        for index, keyword in enumerate(order):
            ranks[keyword] = float(index)

        if "text" in ranks:
            text_rank = ranks["text"]
            ranks["leading"] = text_rank + LEADING_OFFSET
            ranks["font"] = text_rank + FONT_OFFSET

        self._ranks = MappingProxyType(ranks)

    def rank_of(self, prefix: str) -> float | None:
        """Return the rank of a category keyword, or None when unknown"""
        return self._ranks.get(prefix)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._ranks

    def __len__(self) -> int:
        return len(self._ranks)
