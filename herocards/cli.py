"""Command-line front door for herocards.

Parses CLI options, resolves the data directory and theme, and loads the
record files. Then runs one command or the interactive prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import DataError
from .records import MIN_RECORD_CARD_WIDTH, load_library
from .repl import Session, execute, run_repl
from .theme import available_theme_names, resolve_theme

DEFAULT_DATA_DIR = Path("data")


def _card_width(value: str) -> int:
    """argparse type for card widths."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < MIN_RECORD_CARD_WIDTH:
        raise argparse.ArgumentTypeError(f"value must be >= {MIN_RECORD_CARD_WIDTH}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="herocards",
        description="Look up monsters, moves, items and tags and show them as terminal cards.",
    )
    parser.add_argument("command", nargs="*", help="Run one command (e.g. 'move anointed') and exit.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding monsters.json, moves.json, items.json and tags.json.",
    )
    parser.add_argument("--width", type=_card_width, default=None, help="Card width for every record kind.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Card theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--save-config", action="store_true", help="Remember --data-dir, --width and --theme.")
    parser.add_argument("--verbose", action="store_true", help="Log loading and dispatch details to stderr.")
    return parser


def _save_preferences(args: argparse.Namespace) -> None:
    if args.data_dir is not None:
        config.save_data_dir(args.data_dir.resolve())
    if args.width is not None:
        config.save_card_width(args.width)
    if args.theme is not None:
        config.save_theme_name(args.theme)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, load the data files, and dispatch.

    Flags win over stored config; stored config wins over built-in defaults.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.save_config:
        _save_preferences(args)

    data_dir = args.data_dir or config.load_data_dir() or DEFAULT_DATA_DIR
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")
    try:
        library = load_library(data_dir)
    except DataError as exc:
        raise SystemExit(f"Cannot load data: {exc}") from exc

    no_color = args.no_color or not sys.stdout.isatty()
    session = Session(
        library=library,
        theme=resolve_theme(args.theme or config.load_theme_name(), no_color=no_color),
        width=args.width or config.load_card_width(),
    )

    if args.command:
        result = execute(session, " ".join(args.command))
        if result.output:
            sys.stdout.write(result.output + "\n")
        return

    run_repl(session)


if __name__ == "__main__":
    main()
