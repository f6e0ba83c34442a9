"""
Fix command: sorts Tailwind classes in template files
"""

import difflib
import logging
from dataclasses import dataclass, field
from pathlib import Path

from tailwind_cs_fixer.core.backup_manager import BackupManager
from tailwind_cs_fixer.core.base_processor import (
    BaseProcessor,
    ProcessingStatus,
    ProcessResult,
)
from tailwind_cs_fixer.core.config import Config
from tailwind_cs_fixer.core.sorter import TailwindClassSorter
from tailwind_cs_fixer.parsers import BaseParser, get_default_parsers

logger = logging.getLogger(__name__)

# Directories never searched for templates
ALWAYS_EXCLUDED_DIRS = {".git", ".hg", ".svn"}


def generate_diff(original: str, new: str, name: str = "", max_lines: int = 10) -> str:
    """
    Build a unified diff between two versions of a file

    Args:
        original: Content before fixing
        new: Content after fixing
        name: File name shown in the diff header
        max_lines: Maximum number of diff lines, 0 for no limit

    Returns:
        Diff text, empty when both versions are equal
    """
    lines = list(
        difflib.unified_diff(
            original.splitlines(),
            new.splitlines(),
            fromfile=f"a/{name}" if name else "original",
            tofile=f"b/{name}" if name else "fixed",
            lineterm="",
        )
    )
    if max_lines:
        lines = lines[:max_lines]
    return "\n".join(lines)


class TemplateProcessor(BaseProcessor):
    """Rewrites the class attributes of one template file"""

    def __init__(
        self,
        parsers: dict[str, BaseParser],
        dry_run: bool = False,
        show_diff: bool = False,
        diff_max_lines: int = 10,
        backup_manager: BackupManager | None = None,
    ):
        super().__init__()
        self.parsers = parsers
        self.dry_run = dry_run
        self.show_diff = show_diff
        self.diff_max_lines = diff_max_lines
        self.backup_manager = backup_manager

    def get_parser(self, file_path: Path) -> BaseParser | None:
        return self.parsers.get(file_path.suffix.lstrip(".").lower())

    def can_process(self, file_path: Path) -> bool:
        return self.get_parser(file_path) is not None

    def process_file(self, file_path: Path, **kwargs) -> ProcessResult:
        parser = self.get_parser(file_path)
        if parser is None:
            return ProcessResult(
                file_path=file_path,
                status=ProcessingStatus.SKIPPED,
                error_message="No parser for this file type",
            )

        try:
            original_content = self.read_file(file_path)
            new_content, changes = parser.parse_with_count(original_content)

            if new_content == original_content:
                self.logger.debug(f"No changes needed for {file_path}")
                return ProcessResult(
                    file_path=file_path, status=ProcessingStatus.NO_CHANGES
                )

            result = ProcessResult(
                file_path=file_path,
                status=ProcessingStatus.SUCCESS,
                changes_applied=max(changes, 1),
            )

            if self.show_diff:
                result.diff = generate_diff(
                    original_content,
                    new_content,
                    file_path.name,
                    self.diff_max_lines,
                )

            if self.dry_run:
                self.logger.info(f"[DRY RUN] Would fix {file_path}")
                return result

            if self.backup_manager:
                result.backup_path = self.backup_manager.backup_file(file_path)

            self.write_file(file_path, new_content)
            self.logger.info(f"Fixed {file_path}")
            return result

        except (OSError, UnicodeDecodeError) as e:
            return ProcessResult(
                file_path=file_path,
                status=ProcessingStatus.ERROR,
                error_message=str(e),
            )


@dataclass
class FixReport:
    """Outcome of a fix run over a file or directory"""

    path: Path
    status: ProcessingStatus
    results: list[ProcessResult] = field(default_factory=list)
    message: str | None = None

    @property
    def files_processed(self) -> int:
        return len(self.results)

    @property
    def fixed_count(self) -> int:
        return sum(1 for r in self.results if r.changed)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if r.status == ProcessingStatus.ERROR)

    @property
    def changed_results(self) -> list[ProcessResult]:
        return [r for r in self.results if r.changed]


class FixCommand:
    """Command handler sorting classes in HTML and Twig templates"""

    def __init__(self, config: Config, sorter: TailwindClassSorter | None = None):
        """Initialize fix command with configuration"""
        self.config = config
        self.parsers = get_default_parsers(
            sorter,
            expression_open=config.fixer.expression_open,
            expression_close=config.fixer.expression_close,
        )

    def find_files(self, path: Path, extensions: list[str]) -> list[Path]:
        """
        Collect template files under a path

        Args:
            path: File or directory
            extensions: Extensions to include, without the leading dot

        Returns:
            Sorted list of files, excluded directories skipped
        """
        wanted = {ext.lstrip(".").lower() for ext in extensions}

        if path.is_file():
            return [path] if path.suffix.lstrip(".").lower() in wanted else []

        excluded = set(self.config.fixer.excluded_dirs) | ALWAYS_EXCLUDED_DIRS
        excluded.add(Path(self.config.backup.directory).name)

        files = []
        for candidate in path.rglob("*"):
            if not candidate.is_file():
                continue
            relative_dirs = candidate.relative_to(path).parts[:-1]
            if any(part in excluded for part in relative_dirs):
                continue
            if candidate.suffix.lstrip(".").lower() in wanted:
                files.append(candidate)
        return sorted(files)

    def execute(self, path: Path, files: list[Path] | None = None) -> FixReport:
        """
        Execute fixing on a file or directory

        Args:
            path: File or directory to process
            files: Templates already found under path, searched for when None

        Returns:
            FixReport with one ProcessResult per file
        """
        if not path.exists():
            logger.error(f"Path does not exist: {path}")
            return FixReport(
                path=path,
                status=ProcessingStatus.ERROR,
                message=f"Path does not exist: {path}",
            )

        if files is None:
            files = self.find_files(path, self.config.fixer.extensions)
        if not files:
            logger.warning(f"No files found to process in {path}")
            return FixReport(
                path=path,
                status=ProcessingStatus.SKIPPED,
                message="No files found to process",
            )

        backup_manager = None
        if self.config.backup.enabled and not self.config.dry_run:
            backup_manager = BackupManager(
                backup_dir=self.config.backup.directory,
                compression=self.config.backup.compression,
                keep_sessions=self.config.backup.keep_sessions,
            )
            backup_manager.start_session("fix")

        processor = TemplateProcessor(
            self.parsers,
            dry_run=self.config.dry_run,
            show_diff=self.config.show_diff,
            diff_max_lines=self.config.fixer.diff_max_lines,
            backup_manager=backup_manager,
        )

        logger.info(f"Processing {len(files)} file(s) under {path}")
        results = processor.process_batch(files)
        for result in results:
            logger.debug(str(result))

        if backup_manager:
            backup_manager.finalize_session()

        report = FixReport(path=path, status=ProcessingStatus.SUCCESS, results=results)
        logger.info(
            f"Fixed {report.fixed_count} file(s), {report.error_count} error(s)"
        )
        return report
