"""Shared pytest fixtures and test doubles."""

import sys

import pytest
from loguru import logger

from vsm.config import Environment
from vsm.errors import SelectionFailure
from vsm.settings import SettingsStore


class StubProber:
    """Reports a fixed set of programs as installed and records every probe."""

    def __init__(self, installed=()):
        self.installed = set(installed)
        self.probed = []

    def is_installed(self, program):
        self.probed.append(program)
        return program in self.installed


class StubPrompt:
    """Returns canned answers; ``None`` simulates a cancelled prompt."""

    def __init__(self, variant=None, open_choice=None, remove_choice=None):
        self.variant = variant
        self.open_choice = open_choice
        self.remove_choice = remove_choice
        self.offered = {}

    def _answer(self, key, options, answer):
        self.offered[key] = list(options)
        if answer is None:
            raise SelectionFailure("operation was canceled by the user")
        return answer

    def vim_variant(self, variants):
        return self._answer("variant", variants, self.variant)

    def session_open(self, names):
        return self._answer("open", names, self.open_choice)

    def session_remove(self, names):
        return self._answer("remove", names, self.remove_choice)


class SpySettingsStore(SettingsStore):
    """Real store that also counts saves."""

    def __init__(self, config_dir, config_file):
        super().__init__(config_dir, config_file)
        self.saved = []

    def save(self, pref):
        self.saved.append(pref)
        super().save(pref)


@pytest.fixture(autouse=True)
def reset_logging():
    """Put loguru back to a single stderr handler after every test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def env(tmp_path):
    """Environment rooted in a temporary home directory."""
    return Environment.from_env({
        "HOME": str(tmp_path / "home"),
        "VIM_SESSIONS": str(tmp_path / "sessions"),
        "SHELL": "/bin/sh",
    })


@pytest.fixture
def store(env):
    return SpySettingsStore(env.config_dir, env.config_file)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
