"""Command-line front door for fancyls.

Parses CLI options, resolves and validates the target directory, then runs
scan, sort, and table rendering to stdout.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from . import config
from .listing import scan_directory, sort_listing
from .render import print_table
from .ui_theme import available_theme_names, resolve_theme

ERROR_PREFIX = "❌ Error:"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors are a single ``❌``-prefixed line."""

    def error(self, message: str) -> NoReturn:
        raise SystemExit(f"{ERROR_PREFIX} {message}")


def _resolve_directory(raw_path: str) -> Path:
    """Resolve ``raw_path`` to an absolute directory or exit with a message."""
    try:
        path = Path(raw_path).resolve(strict=True)
    except (OSError, RuntimeError):
        raise SystemExit(f"{ERROR_PREFIX} Directory '{raw_path}' does not exist.") from None
    if not path.is_dir():
        raise SystemExit(f"{ERROR_PREFIX} '{raw_path}' is not a directory.")
    return path


def _use_color(no_color_flag: bool) -> bool:
    """Colour only interactive output that the user has not opted out of."""
    if no_color_flag or config.load_no_color():
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _ensure_utf8_stdout() -> None:
    """Switch stdout to UTF-8 so glyphs survive non-UTF-8 locales."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse arguments and print the listing table for one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Every failure raises ``SystemExit`` with a single
    ``❌``-prefixed line and no table is printed.
    """
    parser = _ArgumentParser(
        prog="fancyls",
        description="List a directory as an aligned table with size, modification time, and icons.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Colour theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    args = parser.parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    raw_path = args.path if args.path is not None else str(default_path)
    directory = _resolve_directory(raw_path)

    try:
        entries = scan_directory(directory)
    except OSError as exc:
        raise SystemExit(f"{ERROR_PREFIX} Cannot read directory '{raw_path}': {exc.strerror or exc}") from None

    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=not _use_color(args.no_color))
    _ensure_utf8_stdout()
    print_table(sort_listing(entries), sys.stdout, theme)


if __name__ == "__main__":
    main()
