"""
posix process helpers: probing $PATH through the user's shell and launching
an editor on a session file. no attempt is made to support windows.
"""

from __future__ import annotations

import shlex
import subprocess
from typing import Protocol

from vsm.config import DEFAULT_SHELL
from vsm.errors import CommandExecutorError
from vsm.logger import get_logger

logger = get_logger(__name__)


class InstallationProber(Protocol):
    def is_installed(self, program: str) -> bool: ...


class ShellProber:
    """answers 'is this program on $PATH' with posix ``command -v``"""

    def __init__(self, shell: str = DEFAULT_SHELL):
        self.shell = shell

    def is_installed(self, program: str) -> bool:
        cmd = f"command -v {shlex.quote(program)}"
        logger.debug(f"Executing {cmd}")
        try:
            result = subprocess.run([self.shell, "-c", cmd], stdout=subprocess.DEVNULL)
        except OSError as e:
            logger.error(str(e))
            return False
        return result.returncode == 0


def build_editor_command(variant: str, shell_command: str, session_file: str) -> list[str]:
    return [variant, *shlex.split(shell_command), session_file]


def open_editor(variant: str, shell_command: str, session_file: str) -> None:
    """spawn the editor on a session and block until it exits"""
    cmd = build_editor_command(variant, shell_command, session_file)
    logger.debug(f"Executing: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd)
    except OSError as e:
        raise CommandExecutorError(str(e)) from e
    if result.returncode != 0:
        raise CommandExecutorError(f"{variant} exited with status {result.returncode}")
