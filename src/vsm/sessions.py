"""
session file discovery and removal.

a session is any regular file ending in ``.vim`` directly inside the sessions
directory. everything else (subdirectories, broken links, other extensions)
is ignored without a diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from vsm.errors import SessionRemovalError
from vsm.logger import get_logger

logger = get_logger(__name__)

SESSION_EXTENSION = "vim"


@dataclass(frozen=True)
class SessionFile:
    path: Path

    @property
    def name(self) -> str:
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".")


def is_session_file(path: Path) -> bool:
    return path.is_file() and path.suffix == f".{SESSION_EXTENSION}"


def scan_sessions(directory: Path) -> Optional[list[SessionFile]]:
    """sorted sessions in ``directory``, or None when there is nothing to act on.

    a missing directory is created (parents included). OSError propagates.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.debug(f"Creating {directory}")
        directory.mkdir(parents=True, exist_ok=True)
        return None

    sessions = [
        SessionFile(entry.absolute())
        for entry in directory.iterdir()
        if is_session_file(entry)
    ]
    if not sessions:
        return None

    sessions.sort(key=lambda s: s.path)
    return sessions


def session_names(sessions: Iterable[SessionFile]) -> list[str]:
    return [s.name for s in sessions]


def index_by_name(sessions: Iterable[SessionFile]) -> dict[str, SessionFile]:
    return {s.name: s for s in sessions}


def remove_session(session: SessionFile) -> None:
    try:
        session.path.unlink()
    except OSError as e:
        raise SessionRemovalError(f"Failed to remove {session.path}\n{e}") from e
