"""
errors raised by vsm. anything reaching the cli is unrecoverable and exits 1.
"""

from __future__ import annotations


class VsmError(Exception):
    """base class, renders as '<prefix><msg>'"""

    prefix = ""

    def __init__(self, msg: str = ""):
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"{self.prefix}{self.msg}"


class EnvironmentVariableError(VsmError):
    """a required environment variable is missing; callers degrade to a default"""

    prefix = "Env Error: "


class CommandExecutorError(VsmError):
    """spawning or waiting on an external process failed"""

    prefix = "CommandExecutor Error: "


class SettingsReadError(VsmError):
    prefix = "Toml Read Error: "


class SettingsWriteError(VsmError):
    prefix = "Toml Write Error: "


class NoSupportedVariantFound(VsmError):
    """none of the catalog's variants resolve on $PATH"""

    prefix = "None of the supported vim variants were found on your system => "


class SelectionFailure(VsmError):
    """the prompt was cancelled or the terminal ui failed"""

    prefix = "Selection failure => "


class SessionRemovalError(VsmError):
    prefix = "Failure to delete session => "
