"""
persistence of the user's variant preference in ``config.toml``:

    [vim_variant]
    active_variant = "nvim"
    shell_command = "-S"
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomli_w

from vsm.config import VariantPreference
from vsm.errors import SettingsReadError, SettingsWriteError
from vsm.logger import get_logger

logger = get_logger(__name__)

TABLE = "vim_variant"


class SettingsStore:
    def __init__(self, config_dir: Path, config_file: Path):
        self.config_dir = Path(config_dir)
        self.config_file = Path(config_file)

    def exists(self) -> bool:
        """true only for a regular file; broken symlinks and dirs don't count"""
        return self.config_file.is_file()

    def load(self) -> VariantPreference:
        logger.debug(f"Reading {self.config_file}")
        try:
            with self.config_file.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, ValueError) as e:
            raise SettingsReadError(str(e)) from e

        table = data.get(TABLE)
        if not isinstance(table, dict):
            raise SettingsReadError(f"missing [{TABLE}] table in {self.config_file}")

        values = {}
        for key in ("active_variant", "shell_command"):
            value = table.get(key)
            if not isinstance(value, str):
                raise SettingsReadError(f"missing or invalid field `{key}` in [{TABLE}]")
            values[key] = value
        return VariantPreference(**values)

    def save(self, pref: VariantPreference) -> None:
        """overwrite the config file; not atomic, a torn write fails the next load"""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            serialized = tomli_w.dumps({
                TABLE: {
                    "active_variant": pref.active_variant,
                    "shell_command": pref.shell_command,
                },
            })
            logger.debug(f"Writing config file => {self.config_file}")
            self.config_file.write_text(serialized, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise SettingsWriteError(str(e)) from e
