"""Command-line and environment configuration."""

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from wordpick.wordlist import DEFAULT_WORDLIST

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    wordlist: Path = DEFAULT_WORDLIST
    poll_ms: int = 100  # upper bound on how long SIGINT can go unnoticed
    log_file: Optional[Path] = None
    log_level: str = "WARNING"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    defaults = Settings()

    parser = argparse.ArgumentParser(
        prog="wordpick",
        description="Interactive fuzzy word picker. Prints the chosen word to stdout.",
    )
    parser.add_argument(
        "--wordlist", "-w",
        type=Path,
        default=os.getenv("WORDPICK_WORDLIST", str(defaults.wordlist)),
        help=f"Newline-delimited word list (default: {defaults.wordlist})",
    )
    parser.add_argument(
        "--poll-ms",
        type=positive_int,
        default=os.getenv("WORDPICK_POLL_MS", str(defaults.poll_ms)),
        help=f"Input poll interval in milliseconds (default: {defaults.poll_ms})",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=os.getenv("WORDPICK_LOG_FILE"),
        help="Write logs to this file (default: no log file)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("WORDPICK_LOG_LEVEL", defaults.log_level),
        help=f"Log level (default: {defaults.log_level})",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    # String defaults from the environment go through type= but not choices=.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")
    return Settings(
        wordlist=args.wordlist,
        poll_ms=args.poll_ms,
        log_file=args.log_file,
        log_level=args.log_level,
    )
