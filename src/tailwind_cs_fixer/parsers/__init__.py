"""
Markup adapters locating class attributes and sorting their values
"""

from tailwind_cs_fixer.core.sorter import TailwindClassSorter

from .base import BaseParser
from .html import HtmlParser
from .twig import TwigParser

__all__ = [
    "BaseParser",
    "HtmlParser",
    "TwigParser",
    "get_default_parsers",
]


def get_default_parsers(
    sorter: TailwindClassSorter | None = None,
    expression_open: str = "{{",
    expression_close: str = "}}",
) -> dict[str, BaseParser]:
    """Map each supported file extension to its parser.

    All parsers share one sorter.
    """
    sorter = sorter or TailwindClassSorter()
    parsers = [
        HtmlParser(sorter),
        TwigParser(sorter, expression_open, expression_close),
    ]

    registry = {}
    for parser in parsers:
        for extension in parser.get_supported_extensions():
            registry[extension] = parser
    return registry
