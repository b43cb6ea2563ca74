"""vsm: a small interactive manager for vim session files."""

__version__ = "0.1.1"
