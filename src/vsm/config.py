"""
static configuration: the variant catalog, the user's variant preference and
the paths/variables resolved from the environment once per run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from vsm.errors import EnvironmentVariableError
from vsm.logger import get_logger

logger = get_logger(__name__)

DEFAULT_VARIANT = "nvim"
DEFAULT_SHELL = "/bin/sh"
SESSIONS_ENV_VAR = "VIM_SESSIONS"

# ── variant catalog ───────────────────────────────────────────────────────────

# variant -> flag(s) needed to load a session file with it
SUPPORTED_VIM_VARIANTS: Mapping[str, str] = MappingProxyType({
    "vim":     "-S",
    "nvim":    "-S",
    "gvim":    "-S",
    "neovide": "-- -S",
})


@dataclass(frozen=True)
class VariantCatalog:
    """read-only registry of the vim variants vsm knows how to drive"""

    entries: Mapping[str, str] = field(default_factory=lambda: SUPPORTED_VIM_VARIANTS)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> list[str]:
        return list(self.entries)

    def flag_for(self, name: str) -> str:
        # KeyError here is a bug: choices are always drawn from the catalog
        return self.entries[name]


# ── variant preference ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class VariantPreference:
    active_variant: str
    shell_command: str

    @classmethod
    def from_catalog(cls, catalog: VariantCatalog, name: str) -> "VariantPreference":
        return cls(active_variant=name, shell_command=catalog.flag_for(name))

    @classmethod
    def default(cls, catalog: VariantCatalog) -> "VariantPreference":
        return cls.from_catalog(catalog, DEFAULT_VARIANT)


# ── environment ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Environment:
    """paths and variables vsm needs, resolved once at startup"""

    home: Path
    vim_sessions: Path
    shell: str
    config_dir: Path
    config_file: Path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        environ = os.environ if environ is None else environ

        home = Path(environ["HOME"]) if environ.get("HOME") else Path("~").expanduser()
        default_sessions = home / ".config" / "vim_sessions"

        sessions = environ.get(SESSIONS_ENV_VAR)
        if sessions:
            vim_sessions = Path(sessions).expanduser()
        else:
            logger.warning(str(EnvironmentVariableError(f"{SESSIONS_ENV_VAR} is not defined")))
            logger.warning(f"Defaulting to {default_sessions}")
            vim_sessions = default_sessions

        config_dir = home / ".config" / "vsm"
        return cls(
            home=home,
            vim_sessions=vim_sessions,
            shell=environ.get("SHELL") or DEFAULT_SHELL,
            config_dir=config_dir,
            config_file=config_dir / "config.toml",
        )

    def __str__(self) -> str:
        return (
            f"Users home directory: {self.home}\n"
            f"Vim session file location: {self.vim_sessions}\n"
            f"Vsm config file location: {self.config_file}"
        )
