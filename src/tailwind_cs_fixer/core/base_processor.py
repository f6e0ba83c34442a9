"""
Processor base for rewriting templates one file at a time
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

TEMPLATE_ENCODING = "utf-8"


class ProcessingStatus(Enum):
    """Outcome of one template"""

    SUCCESS = "success"
    NO_CHANGES = "no_changes"
    SKIPPED = "skipped"
    ERROR = "error"


_STATUS_SYMBOLS = {
    ProcessingStatus.SUCCESS: "✓",
    ProcessingStatus.NO_CHANGES: "=",
    ProcessingStatus.SKIPPED: "⊝",
    ProcessingStatus.ERROR: "✗",
}


@dataclass
class ProcessResult:
    """What happened to one template"""

    file_path: Path
    status: ProcessingStatus
    changes_applied: int = 0
    diff: str | None = None
    error_message: str | None = None
    backup_path: Path | None = None

    @property
    def is_success(self) -> bool:
        """Fixed or already sorted"""
        return self.status in (ProcessingStatus.SUCCESS, ProcessingStatus.NO_CHANGES)

    @property
    def changed(self) -> bool:
        """Class attributes were (or in a dry run, would be) rewritten"""
        return self.status == ProcessingStatus.SUCCESS and self.changes_applied > 0

    def __str__(self) -> str:
        symbol = _STATUS_SYMBOLS[self.status]
        name = self.file_path.name
        if self.status == ProcessingStatus.SUCCESS:
            return f"{symbol} {name}: {self.changes_applied} attribute(s) sorted"
        if self.status == ProcessingStatus.NO_CHANGES:
            return f"{symbol} {name}: already sorted"
        if self.status == ProcessingStatus.SKIPPED:
            return f"{symbol} {name}: skipped"
        return f"{symbol} {name}: {self.error_message}"


class BaseProcessor(ABC):
    """Reads, rewrites and writes back templates"""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def can_process(self, file_path: Path) -> bool:
        """True when a template of this type can be rewritten"""

    @abstractmethod
    def process_file(self, file_path: Path, **kwargs) -> ProcessResult:
        """
        Rewrite one template

        Args:
            file_path: Template to rewrite
            **kwargs: Processor specific options

        Returns:
            ProcessResult for the template
        """

    def read_file(self, file_path: Path) -> str:
        try:
            return file_path.read_text(encoding=TEMPLATE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Cannot read template {file_path}: {e}")
            raise

    def write_file(self, file_path: Path, content: str) -> None:
        try:
            file_path.write_text(content, encoding=TEMPLATE_ENCODING)
        except OSError as e:
            self.logger.error(f"Cannot write template {file_path}: {e}")
            raise

    def process_batch(self, file_paths: list[Path], **kwargs) -> list[ProcessResult]:
        """Rewrite templates in order, one result per path.

        Paths this processor cannot handle are reported as skipped.
        """
        results = []
        for file_path in file_paths:
            if not self.can_process(file_path):
                results.append(
                    ProcessResult(
                        file_path=file_path,
                        status=ProcessingStatus.SKIPPED,
                        error_message=f"Unsupported template type: {file_path.suffix}",
                    )
                )
                continue
            results.append(self.process_file(file_path, **kwargs))
        return results
