"""
the session manager itself. if you want to know how vsm works, read this file.

    setup     -> load config.toml, or run the variant picker on a first run
    dispatch  -> list / open / remove sessions, or change the active variant
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from vsm.config import Environment, VariantCatalog, VariantPreference
from vsm.errors import NoSupportedVariantFound, SessionRemovalError, VsmError
from vsm.logger import get_logger
from vsm.prompt import PromptRenderer, Selector
from vsm.sessions import (
    SessionFile,
    index_by_name,
    remove_session,
    scan_sessions,
    session_names,
)
from vsm.settings import SettingsStore
from vsm.shell import InstallationProber, ShellProber, open_editor

logger = get_logger(__name__)

EditorLauncher = Callable[[str, str, str], None]


class Command(str, Enum):
    LIST = "list"
    OPEN = "open"
    REMOVE = "remove"
    VARIANT = "variant"


class VimSessionManager:
    """owns the per-run state: first-run flag, active preference, environment"""

    def __init__(
        self,
        env: Environment,
        store: SettingsStore,
        prober: InstallationProber,
        prompt: PromptRenderer,
        launcher: EditorLauncher = open_editor,
        catalog: Optional[VariantCatalog] = None,
    ):
        self.env = env
        self.store = store
        self.prober = prober
        self.prompt = prompt
        self.launcher = launcher
        self.catalog = catalog if catalog is not None else VariantCatalog()
        self.preference = VariantPreference.default(self.catalog)
        self.first_run = True

    @classmethod
    def from_environment(cls, env: Environment) -> "VimSessionManager":
        return cls(
            env=env,
            store=SettingsStore(env.config_dir, env.config_file),
            prober=ShellProber(env.shell),
            prompt=Selector(),
        )

    def run(self, command: Command) -> None:
        """errors that escape this method are unrecoverable"""
        self.setup()
        self.dispatch(command)

    # ── setup ─────────────────────────────────────────────────────────────────

    def setup(self) -> None:
        if self.store.exists():
            self.first_run = False
            self.preference = self.store.load()
            logger.debug(f"Active variant => {self.preference.active_variant}")
        else:
            logger.warning("No config file detected")
            self.select_variant()

    def select_variant(self) -> VariantPreference:
        """prompt for one of the installed variants and persist the choice"""
        installed: list[str] = []
        missing: list[str] = []
        for variant in self.catalog:
            (installed if self.prober.is_installed(variant) else missing).append(variant)

        if not installed:
            raise NoSupportedVariantFound(", ".join(missing))

        if not self.first_run:
            logger.info(f"Current active variant is => {self.preference.active_variant}")

        choice = self.prompt.vim_variant(installed)

        # same variant as before: nothing to write
        if not self.first_run and choice == self.preference.active_variant:
            return self.preference

        self.preference = VariantPreference.from_catalog(self.catalog, choice)
        self.store.save(self.preference)
        return self.preference

    # ── dispatch ──────────────────────────────────────────────────────────────

    def dispatch(self, command: Command) -> None:
        if command is Command.VARIANT:
            # the picker already ran during setup on a first run
            if not self.first_run:
                self.update_variant()
            return

        try:
            sessions = scan_sessions(self.env.vim_sessions)
        except OSError as e:
            logger.error(str(e))
            return

        if not sessions:
            logger.warning("No session files found")
            return

        if command is Command.LIST:
            self.list_sessions(sessions)
            return

        action = self.open_session if command is Command.OPEN else self.remove_sessions
        try:
            action(sessions)
        except VsmError as e:
            logger.error(str(e))

    def list_sessions(self, sessions: list[SessionFile]) -> list[str]:
        logger.debug("Listing all sessions")
        names = session_names(sessions)
        for name in names:
            logger.info(name)
        return names

    def open_session(self, sessions: list[SessionFile]) -> SessionFile:
        logger.debug("Opening a session")
        choice = self.prompt.session_open(session_names(sessions))
        session = index_by_name(sessions)[choice]
        self.launcher(
            self.preference.active_variant,
            self.preference.shell_command,
            str(session.path),
        )
        return session

    def remove_sessions(self, sessions: list[SessionFile]) -> list[SessionFile]:
        """delete every selected session, attempting all of them even if some fail"""
        logger.debug("Removing stale sessions")
        chosen = self.prompt.session_remove(session_names(sessions))

        removed: list[SessionFile] = []
        failures: list[SessionRemovalError] = []
        for session in sessions:
            if session.name not in chosen:
                continue
            logger.info(f"Removing => {session.name}")
            try:
                remove_session(session)
            except SessionRemovalError as e:
                failures.append(e)
            else:
                removed.append(session)

        if failures:
            raise SessionRemovalError("\n".join(f.msg for f in failures))
        return removed

    def update_variant(self) -> None:
        logger.debug("Updating users vim variant selection")
        self.select_variant()
        logger.info("Successfully updated the active vim variant")
