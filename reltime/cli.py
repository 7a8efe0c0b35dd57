from __future__ import annotations

import sys
from typing import NoReturn

from . import __version__
from .config import load_config
from .formatter import format_time
from .tui import WatchApp
from .utils.time import now_ms

USAGE_ERROR = 2


def main() -> None:
    """Entry point for the `reltime` console script.

    Prints the relative time for a timestamp, or launches the live Textual
    view for the `watch` command.

    Returns:
        None
    """
    args = sys.argv[1:]
    if not args or args[0] in ("--help", "-h"):
        print_help()
        return
    command = args[0]
    if command in ("--version", "-v"):
        print(f"reltime {__version__}")
        return
    if command == "now":
        print(now_ms())
        return

    watch = command == "watch"
    if watch:
        args = args[1:]

    positional = [a for a in args if not a.startswith("--")]
    flags = [a for a in args if a.startswith("--")]
    if len(positional) != 1:
        usage_error("expected exactly one timestamp in milliseconds")
    timestamp_ms = parse_timestamp(positional[0])

    cfg = load_config()
    for flag in flags:
        if flag == "--short":
            cfg.abbreviate_unit = True
        elif flag == "--long":
            cfg.abbreviate_unit = False
        else:
            usage_error(f"unknown option '{flag}'")

    if watch:
        WatchApp(timestamp_ms, cfg=cfg).run()
        return
    print(format_time(timestamp_ms, cfg.abbreviate_unit))


def parse_timestamp(value: str) -> int:
    """Parse a millisecond epoch timestamp given on the command line.

    Args:
        value: The raw argument, e.g. "1700000000000".

    Returns:
        The timestamp as an integer.
    """
    try:
        return int(value)
    except ValueError:
        usage_error(f"'{value}' is not an integer timestamp in milliseconds")


def usage_error(message: str) -> NoReturn:
    """Report a command-line mistake on stderr and exit with status 2."""
    print(f"Error: {message}", file=sys.stderr)
    print("Run 'reltime --help' for usage.", file=sys.stderr)
    sys.exit(USAGE_ERROR)


def print_help() -> None:
    """Print help message for reltime CLI commands.

    Returns:
        None
    """
    help_text = """reltime - Human-readable "time ago" strings

Usage:
  reltime <timestamp_ms> [--short|--long]        Print how long ago the timestamp was
  reltime watch <timestamp_ms> [--short|--long]  Show a live view in the terminal
  reltime now                                    Print the current time in epoch ms
  reltime --version                              Show version information
  reltime --help                                 Show this help message

Options:
  --short    Abbreviate units (sec, min, hr, wk, mth, yr)
  --long     Spell out units in full

Defaults are read from ~/.config/reltime/config.json.
"""
    print(help_text)
