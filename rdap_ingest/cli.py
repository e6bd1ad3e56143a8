"""Command-line entry point: flatten an ARIN RDAP dump into JSON lines."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .errors import ConfigError, DocumentError
from .extraction.transformer import parse_file
from .logging_setup import setup_logging
from .settings import DEFAULT_POOL_SIZE, DEFAULT_TARGET_DIR, LOG_LEVEL, TERMINAL_PACING_SECONDS
from .services.export_service import write_records
from .services.run_service import run_pipeline

logger = logging.getLogger("rdap_ingest")

CONFIRM_PROMPT = "WARNING: This script will output a large amount of data. Continue? [y/N]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rdap-ingest", description=__doc__)
    parser.add_argument("--test-file", type=Path, help="Parse a single file and print its records")
    parser.add_argument(
        "--target-dir",
        type=Path,
        default=DEFAULT_TARGET_DIR,
        help="Target directory with the files to parse",
    )
    parser.add_argument("--workers", type=int, default=DEFAULT_POOL_SIZE, help="Number of parallel workers")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt on a terminal")
    return parser


def check_test_file(path: Path) -> None:
    if not path.exists():
        raise ConfigError(f"{path} file does not exist")
    if path.is_dir():
        raise ConfigError(f"{path} is a directory")


def check_target_dir(path: Path) -> None:
    if not path.exists():
        raise ConfigError(f"{path} directory does not exist")
    if not path.is_dir():
        raise ConfigError(f"{path} is not a directory")


def confirm(stdin: TextIO, stdout: TextIO) -> bool:
    print(CONFIRM_PROMPT, file=stdout, flush=True)
    answer = stdin.readline().strip()
    return answer == "y"


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.workers < 1:
        print("--workers must be at least 1", file=sys.stderr)
        return 2

    try:
        if args.test_file is not None:
            check_test_file(args.test_file)
        else:
            check_target_dir(args.target_dir)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.test_file is not None:
        try:
            records = parse_file(args.test_file)
        except DocumentError as exc:
            print(f"Error parsing '{args.test_file}': {exc}", file=sys.stderr)
            return 1
        write_records(records, sys.stdout)
        return 0

    is_terminal = sys.stdout.isatty()
    if is_terminal and not args.yes and not confirm(sys.stdin, sys.stdout):
        return 0

    result = run_pipeline(args.target_dir, workers=args.workers)
    write_records(result.records, sys.stdout, TERMINAL_PACING_SECONDS if is_terminal else 0.0)

    for failure in result.failures:
        logger.error("Skipped %s (%s): %s", failure.path, failure.error_type, failure.message)
    return 1 if result.failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
