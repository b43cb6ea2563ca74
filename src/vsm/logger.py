"""
console logging for vsm, built on loguru.

every record is rendered as a single coloured token in brackets followed by
the message, e.g. ``[✓] work`` or ``[x] Toml Read Error: ...``.
"""

from __future__ import annotations

import os
import sys

from loguru import logger

LEVEL_ENV_VAR = "LOGURU_LEVEL"

# ── level styling ─────────────────────────────────────────────────────────────

_TOKENS = {
    "CRITICAL": "x",
    "ERROR":    "x",
    "WARNING":  "!",
    "SUCCESS":  "✓",
    "INFO":     "✓",
    "DEBUG":    "D",
    "TRACE":    "T",
}

_COLORS = {
    "ERROR":   "<red><bold>",
    "WARNING": "<yellow><bold>",
    "INFO":    "<green><bold>",
    "DEBUG":   "<blue><bold>",
    "TRACE":   "<magenta><bold>",
}

_GUTTER = "\n | "


def _format(record) -> str:
    record["extra"]["token"] = _TOKENS.get(record["level"].name, "?")
    record["extra"]["body"] = record["message"].replace("\n", _GUTTER)
    return (
        "<white><bold>[</bold></white><level>{extra[token]}</level>"
        "<white><bold>]</bold></white> {extra[body]}\n{exception}"
    )


# ── public api ────────────────────────────────────────────────────────────────

def setup_logging(level: str = "INFO", sink=None) -> None:
    """replace every loguru handler with the vsm console sink.

    ``LOGURU_LEVEL`` in the environment wins over ``level`` so users can filter
    without touching the cli flags.
    """
    level = os.environ.get(LEVEL_ENV_VAR, level).upper()
    for name, color in _COLORS.items():
        logger.level(name, color=color)

    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_format,
        backtrace=False,
        diagnose=False,
    )


def get_logger(name: str):
    return logger.bind(name=name)
