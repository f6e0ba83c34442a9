"""
Twig/Jinja class attribute parser

Class values may mix literal classes with template expressions, e.g.
``class="p-4 {{ extra }} bg-white"``. Expressions are kept verbatim and in
place; each literal run between them is sorted on its own.
"""

import re

from tailwind_cs_fixer.core.sorter import TailwindClassSorter
from tailwind_cs_fixer.parsers.base import BaseParser

# Quoted class value without nested quotes
_CLASS_ATTRIBUTE_RE = re.compile(r"""(?<![\w-])class=(["'])([^"']*)\1""")

# Values holding block tags or comments are never rewritten
BLOCK_MARKERS = ("{%", "{#")


class TwigParser(BaseParser):
    """Sorts class attributes of templates, leaving expressions untouched"""

    extensions = ("twig", "jinja", "j2")

    def __init__(
        self,
        sorter: TailwindClassSorter | None = None,
        expression_open: str = "{{",
        expression_close: str = "}}",
    ):
        """
        Initialize parser

        Args:
            sorter: Sorter used for class values
            expression_open: Marker opening a template expression
            expression_close: Marker closing a template expression
        """
        super().__init__(sorter)
        self.expression_open = expression_open
        self.expression_close = expression_close
        open_re = re.escape(expression_open)
        close_re = re.escape(expression_close)
        first_close_char = re.escape(expression_close[:1])
        self._expression_re = re.compile(
            f"({open_re}[^{first_close_char}]+{close_re})"
        )

    def parse_with_count(self, content: str) -> tuple[str, int]:
        changed = 0

        def replace(match: re.Match) -> str:
            nonlocal changed
            quote, value = match.group(1), match.group(2)
            if any(marker in value for marker in BLOCK_MARKERS):
                return match.group(0)
            if self.expression_open in value:
                new_value = self.sort_mixed_value(value)
            else:
                new_value = self.sorter.sort(value)
            if new_value != value:
                changed += 1
            return f"class={quote}{new_value}{quote}"

        return _CLASS_ATTRIBUTE_RE.sub(replace, content), changed

    def split_value(self, value: str) -> list[tuple[bool, str]]:
        """
        Split a class value into literal and expression runs

        Returns:
            List of (is_expression, text) tuples in original order
        """
        runs = []
        for part in self._expression_re.split(value):
            if not part:
                continue
            runs.append((bool(self._expression_re.fullmatch(part)), part))
        return runs

    def sort_mixed_value(self, value: str) -> str:
        """Sort the literal runs of a value holding template expressions.

        Tokens touching an expression stay attached to it. Values whose
        markers do not pair up are returned unchanged.
        """
        runs = self.split_value(value)
        for is_expression, text in runs:
            if not is_expression and (
                self.expression_open in text or self.expression_close in text
            ):
                return value

        last = len(runs) - 1
        result = ""
        for index, (is_expression, text) in enumerate(runs):
            if is_expression:
                result += text
                continue

            # A token touching an expression is part of a generated class
            # (btn-{{ variant }}) and stays glued to it.
            glued_head = index > 0 and not text[0].isspace()
            glued_tail = index < last and not text[-1].isspace()
            tokens = text.split()
            head = tokens.pop(0) if glued_head and tokens else ""
            tail = tokens.pop() if glued_tail and tokens else ""
            words = [w for w in (head, self.sorter.sort(" ".join(tokens)), tail) if w]

            if not words:
                if 0 < index < last:
                    result += " "
                continue
            if index > 0 and not glued_head:
                result += " "
            result += " ".join(words)
            if index < last and not glued_tail:
                result += " "
        return result
