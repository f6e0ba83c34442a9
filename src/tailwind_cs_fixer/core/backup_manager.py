"""
Backup sessions for templates rewritten by the fixer

Each fix run that has backups enabled opens one session directory under the
backup root. Templates are copied there, keyed by their absolute path, before
they are rewritten. Finalized sessions carry a metadata file and may be packed
into a ``.tar.gz`` archive.
"""

import json
import logging
import shutil
import tarfile
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SESSION_PREFIX = "session_"
METADATA_FILE = "session_metadata.json"
ARCHIVE_SUFFIX = ".tar.gz"


def _session_relative(template: Path) -> Path:
    """Location of a template inside a session directory"""
    return Path(*template.parts[1:]) if template.is_absolute() else template


@dataclass
class BackupSession:
    session_id: str
    timestamp: str
    directory: Path
    files: list[str] = field(default_factory=list)
    total_size: int = 0
    compressed: bool = False


class BackupManager:
    """Keeps copies of templates from before a fix run"""

    def __init__(
        self,
        backup_dir: str = ".backups",
        compression: bool = False,
        keep_sessions: int = 10,
    ):
        """
        Args:
            backup_dir: Root directory of all sessions
            compression: Pack finalized sessions into archives
            keep_sessions: Sessions kept when pruning, newest first
        """
        self.backup_dir = Path(backup_dir)
        self.compression = compression
        self.keep_sessions = keep_sessions
        self.current_session: BackupSession | None = None
        self.backup_dir.mkdir(parents=True, exist_ok=True)

    def start_session(self, description: str | None = None) -> Path:
        """Open a session, named after the current time and the description"""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        name = SESSION_PREFIX + stamp
        if description:
            name += f"_{description}"

        directory = self.backup_dir / name
        directory.mkdir(parents=True, exist_ok=True)
        self.current_session = BackupSession(
            session_id=name, timestamp=stamp, directory=directory
        )
        logger.info(f"Opened backup session {name}")
        return directory

    def backup_file(self, file_path: Path) -> Path | None:
        """Copy a template into the open session, opening one when needed"""
        if self.current_session is None:
            self.start_session()

        if not file_path.exists():
            logger.warning(f"Nothing to back up, {file_path} is missing")
            return None

        source = file_path.resolve()
        target = self.current_session.directory / _session_relative(source)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
        except OSError as e:
            logger.error(f"Could not back up {file_path}: {e}")
            return None

        self.current_session.files.append(str(source))
        self.current_session.total_size += source.stat().st_size
        logger.debug(f"{file_path} backed up to {target}")
        return target

    def finalize_session(self) -> Path | None:
        """Close the open session.

        Writes the metadata file, packs the session when compression is on,
        then prunes old sessions.

        Returns:
            Session directory or archive, None when nothing was open or
            writing failed
        """
        session = self.current_session
        if session is None:
            logger.warning("finalize_session called without an open session")
            return None

        try:
            metadata_path = session.directory / METADATA_FILE
            metadata_path.write_text(
                json.dumps(asdict(session), indent=2, default=str), encoding="utf-8"
            )

            location = session.directory
            if self.compression:
                location = self._pack(session)
                shutil.rmtree(session.directory)
                session.compressed = True

            self.cleanup_old_sessions()
            logger.info(f"Closed backup session {session.session_id} ({location})")
            return location
        except (OSError, tarfile.TarError) as e:
            logger.error(f"Could not close backup session {session.session_id}: {e}")
            return None
        finally:
            self.current_session = None

    def _pack(self, session: BackupSession) -> Path:
        archive = self.backup_dir / (session.session_id + ARCHIVE_SUFFIX)
        with tarfile.open(archive, "w:gz") as tar:
            tar.add(session.directory, arcname=session.session_id)
        return archive

    def _entries(self) -> list[Path]:
        return [
            entry
            for entry in self.backup_dir.iterdir()
            if entry.name.startswith(SESSION_PREFIX)
            and (entry.is_dir() or entry.name.endswith(ARCHIVE_SUFFIX))
        ]

    def cleanup_old_sessions(self) -> int:
        """Delete all but the newest keep_sessions sessions

        Returns:
            Number of sessions deleted
        """
        newest_first = sorted(self._entries(), key=lambda p: p.name, reverse=True)

        removed = 0
        for entry in newest_first[self.keep_sessions :]:
            try:
                if entry.is_dir():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            except OSError as e:
                logger.error(f"Could not delete old session {entry}: {e}")
                continue
            removed += 1
            logger.debug(f"Deleted old session {entry.name}")
        return removed

    def list_sessions(self) -> list[dict[str, Any]]:
        """Describe every session, newest first"""
        sessions = []
        for entry in self._entries():
            metadata_path = entry / METADATA_FILE
            if entry.is_dir() and metadata_path.exists():
                sessions.append(json.loads(metadata_path.read_text(encoding="utf-8")))
            elif entry.is_dir():
                sessions.append({"session_id": entry.name, "directory": str(entry)})
            else:
                sessions.append(
                    {
                        "session_id": entry.name[: -len(ARCHIVE_SUFFIX)],
                        "archive": str(entry),
                        "compressed": True,
                    }
                )

        for session in sessions:
            session.setdefault("timestamp", session["session_id"][len(SESSION_PREFIX) :])
        return sorted(sessions, key=lambda s: s["session_id"], reverse=True)

    def restore_session(self, session_id: str) -> bool:
        """Copy every template of a session back where it came from"""
        directory = self.backup_dir / session_id
        archive = self.backup_dir / (session_id + ARCHIVE_SUFFIX)
        unpacked = False

        try:
            if not directory.exists() and archive.exists():
                with tarfile.open(archive, "r:gz") as tar:
                    tar.extractall(self.backup_dir, filter="data")
                unpacked = True

            metadata_path = directory / METADATA_FILE
            if not metadata_path.exists():
                logger.error(f"No backup session named {session_id}")
                return False

            metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
            for name in metadata.get("files", []):
                template = Path(name)
                copy = directory / _session_relative(template)
                if not copy.exists():
                    logger.warning(f"Session {session_id} has no copy of {template}")
                    continue
                template.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(copy, template)
                logger.info(f"Restored {template}")
            return True
        except (OSError, ValueError, tarfile.TarError) as e:
            logger.error(f"Could not restore session {session_id}: {e}")
            return False
        finally:
            if unpacked and directory.exists():
                shutil.rmtree(directory)
