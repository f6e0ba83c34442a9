"""
Settings for the fixer

Settings come from three places, later ones winning: the user file
``~/.tailwind-cs-fixer/config.yaml``, the project file
``.tailwind-cs-fixer.yaml`` and ``TAILWIND_CS_FIXER_*`` environment variables.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".tailwind-cs-fixer.yaml"
GLOBAL_CONFIG_DIR = ".tailwind-cs-fixer"
ENV_PREFIX = "TAILWIND_CS_FIXER_"

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIX = ".json"

_TRUE_VALUES = ["true", "1", "yes"]
_FLAGS = ("dry_run", "show_diff", "verbose", "quiet")


@dataclass
class FixerConfig:
    """Which templates are fixed and how"""

    extensions: list[str] = field(default_factory=lambda: ["html", "twig"])
    excluded_dirs: list[str] = field(
        default_factory=lambda: ["vendor", "node_modules", "var", "cache"]
    )
    diff_max_lines: int = 10
    expression_open: str = "{{"
    expression_close: str = "}}"


@dataclass
class BackupConfig:
    """Where templates are copied before a fix run"""

    enabled: bool = False
    directory: str = ".backups"
    compression: bool = True
    keep_sessions: int = 10


def _read_mapping(filepath: Path) -> dict[str, Any]:
    text = filepath.read_text(encoding="utf-8")
    if filepath.suffix in YAML_SUFFIXES:
        return yaml.safe_load(text) or {}
    return json.loads(text) if text.strip() else {}


def _overlay(target: Any, source: Any) -> None:
    """Copy the fields of source that differ from their defaults onto target"""
    defaults = type(source)()
    for f in fields(source):
        value = getattr(source, f.name)
        if value != getattr(defaults, f.name):
            setattr(target, f.name, value)


@dataclass
class Config:
    """All fixer settings"""

    dry_run: bool = False
    show_diff: bool = False
    verbose: bool = False
    quiet: bool = False

    fixer: FixerConfig = field(default_factory=FixerConfig)
    backup: BackupConfig = field(default_factory=BackupConfig)

    @classmethod
    def from_file(cls, filepath: Path) -> "Config":
        """
        Read settings from a ``.yaml``, ``.yml`` or ``.json`` file

        Missing, unreadable or malformed files give the defaults.
        """
        if not filepath.exists():
            logger.warning(f"No settings file at {filepath}")
            return cls()
        if filepath.suffix not in YAML_SUFFIXES and filepath.suffix != JSON_SUFFIX:
            logger.error(f"Settings files must be YAML or JSON, got {filepath.name}")
            return cls()

        try:
            return cls._from_dict(_read_mapping(filepath))
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.error(f"Ignoring settings in {filepath}: {e}")
            return cls()

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        config = cls(**{flag: data[flag] for flag in _FLAGS if flag in data})
        # An empty YAML section ("fixer:") loads as None
        if "fixer" in data:
            config.fixer = FixerConfig(**(data["fixer"] or {}))
        if "backup" in data:
            config.backup = BackupConfig(**(data["backup"] or {}))
        return config

    @classmethod
    def load_hierarchy(cls, project_dir: Path | None = None) -> "Config":
        """Combine the user file, the project file and the environment"""
        user_file = Path.home() / GLOBAL_CONFIG_DIR / "config.yaml"
        config = cls.from_file(user_file) if user_file.exists() else cls()
        if user_file.exists():
            logger.debug(f"User settings read from {user_file}")

        project_file = project_dir / PROJECT_CONFIG_NAME if project_dir else None
        if project_file and project_file.exists():
            config.merge(cls.from_file(project_file))
            logger.debug(f"Project settings read from {project_file}")

        config.apply_env_vars()
        return config

    def merge(self, other: "Config") -> None:
        """Overlay other onto this config.

        Flags only ever switch on. Section fields are taken from other when
        they differ from their defaults.
        """
        for flag in _FLAGS:
            if getattr(other, flag):
                setattr(self, flag, True)
        _overlay(self.fixer, other.fixer)
        _overlay(self.backup, other.backup)

    def apply_env_vars(self) -> None:
        def enabled(name: str) -> bool:
            return os.environ.get(ENV_PREFIX + name, "").lower() in _TRUE_VALUES

        if enabled("DRY_RUN"):
            self.dry_run = True
        if enabled("VERBOSE"):
            self.verbose = True
        if extensions := os.environ.get(ENV_PREFIX + "EXTENSIONS"):
            self.fixer.extensions = parse_extensions(extensions)

    def validate(self) -> list[str]:
        """Problems with the current settings, empty when usable"""
        fixer, backup = self.fixer, self.backup
        errors = [
            f"Invalid file extension: {ext}"
            for ext in fixer.extensions
            if not ext.isalnum()
        ]
        if not fixer.extensions:
            errors.insert(0, "At least one file extension is required")
        if fixer.diff_max_lines < 0:
            errors.append("diff_max_lines must be zero or positive")
        if not (fixer.expression_open and fixer.expression_close):
            errors.append("Template expression markers must not be empty")
        if backup.keep_sessions < 1:
            errors.append("keep_sessions must be at least 1")
        return errors

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {flag: getattr(self, flag) for flag in _FLAGS}
        data["fixer"] = asdict(self.fixer)
        data["backup"] = asdict(self.backup)
        return data

    def save(self, filepath: Path) -> None:
        """Write settings as YAML or JSON, picked by the file suffix"""
        if filepath.suffix == JSON_SUFFIX:
            text = json.dumps(self.to_dict(), indent=2)
        elif filepath.suffix in YAML_SUFFIXES:
            text = yaml.safe_dump(
                self.to_dict(), default_flow_style=False, sort_keys=False
            )
        else:
            raise ValueError(f"Unsupported config file format: {filepath.suffix}")
        filepath.write_text(text, encoding="utf-8")


def parse_extensions(value: str) -> list[str]:
    """Parse a comma separated extension list ("html, .twig" -> [html, twig])"""
    extensions = []
    for item in value.split(","):
        item = item.strip().lstrip(".").lower()
        if item and item not in extensions:
            extensions.append(item)
    return extensions
