"""
HTML class attribute parser
"""

import re

from tailwind_cs_fixer.parsers.base import BaseParser

_CLASS_PATTERNS = (
    re.compile(r'(?<![\w-])class="([^"]+)"'),
    re.compile(r"(?<![\w-])class='([^']+)'"),
)


class HtmlParser(BaseParser):
    """Sorts class="..." and class='...' attributes of plain HTML"""

    extensions = ("html", "htm")

    def parse_with_count(self, content: str) -> tuple[str, int]:
        changed = 0

        def replace(match: re.Match) -> str:
            nonlocal changed
            classes = match.group(1)
            sorted_classes = self.sorter.sort(classes)
            if sorted_classes != classes:
                changed += 1
            quote = match.group(0)[6]
            return f"class={quote}{sorted_classes}{quote}"

        for pattern in _CLASS_PATTERNS:
            content = pattern.sub(replace, content)

        return content, changed
