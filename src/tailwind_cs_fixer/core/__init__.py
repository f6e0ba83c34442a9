"""Core sorting, configuration and processing components"""

from .order_rules import CLASS_ORDER, OrderIndex
from .sorter import TailwindClassSorter
from .variants import VariantClass

__all__ = [
    "CLASS_ORDER",
    "OrderIndex",
    "TailwindClassSorter",
    "VariantClass",
]
