#!/usr/bin/env python3
"""
vsm — vim session manager
lists, opens and removes vim session files with the user's preferred variant
"""

from vsm.cli import app


def main() -> None:
    app(prog_name="vsm")


if __name__ == "__main__":
    main()
