"""
Base parser interface for markup adapters
"""

from abc import ABC, abstractmethod

from tailwind_cs_fixer.core.sorter import TailwindClassSorter


class BaseParser(ABC):
    """Abstract base class for class attribute rewriters"""

    # File extensions handled by this parser, without the leading dot
    extensions: tuple[str, ...] = ()

    def __init__(self, sorter: TailwindClassSorter | None = None):
        """
        Initialize parser

        Args:
            sorter: Sorter used for class values, a default one when omitted
        """
        self.sorter = sorter or TailwindClassSorter()

    def get_supported_extensions(self) -> list[str]:
        """Return the file extensions handled by this parser"""
        return list(self.extensions)

    def parse(self, content: str) -> str:
        """Return the content with every class attribute sorted"""
        return self.parse_with_count(content)[0]

    @abstractmethod
    def parse_with_count(self, content: str) -> tuple[str, int]:
        """
        Sort every class attribute of the content

        Args:
            content: Markup text

        Returns:
            Tuple of the rewritten content and the number of attribute
            values that changed
        """
        pass
