# threatrank/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from . import config
from .config import DEFAULT_WEIGHTS
from .ingest import load_contacts
from .report import render_table, write_ranking_csv
from .triage import triage

EXIT_OK = 0
EXIT_NO_CONTACTS = 1
EXIT_ERROR = 2

# Rejected rows and run-level failures; shown on stderr at any log level.
diagnostics = logger.bind(diagnostic=True)


def _configure_logging(level: str, log_file: Optional[Path]) -> None:
    threshold = logger.level(level).no

    def _stderr_filter(record) -> bool:
        return record["level"].no >= threshold or record["extra"].get("diagnostic", False)

    logger.remove()
    logger.add(sys.stderr, level=0, format=config.LOG_FORMAT, filter=_stderr_filter)
    if log_file is not None:
        logger.add(log_file, level="DEBUG")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="threatrank",
        description="Rank radar contacts by heuristic threat score.",
    )
    ap.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=config.DEFAULT_INPUT_PATH,
        help=f"Contact CSV (default: {config.DEFAULT_INPUT_PATH})",
    )
    ap.add_argument("--csv-out", type=Path, default=None,
                    help="Also write the ranking, with per-term scores, to this CSV")
    ap.add_argument("--log-level", type=str.upper, choices=config.LOG_LEVELS,
                    default=config.LOG_LEVEL,
                    help=("stderr log level (default: $THREATRANK_LOG_LEVEL or WARNING); "
                          "rejected-row diagnostics are always shown"))
    ap.add_argument("--log-file", type=Path, default=None,
                    help="Write a DEBUG-level log to this file")
    return ap


def run(input_path: Path, csv_out: Optional[Path] = None) -> int:
    parsed = load_contacts(input_path)
    if not parsed.contacts:
        diagnostics.error("No contacts loaded from {}", input_path)
        return EXIT_NO_CONTACTS

    results = triage(parsed.contacts, DEFAULT_WEIGHTS)
    sys.stdout.write(render_table(results))

    if csv_out is not None:
        write_ranking_csv(results, csv_out, DEFAULT_WEIGHTS)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level not in config.LOG_LEVELS:
        _configure_logging("WARNING", args.log_file)
        diagnostics.error(
            "Invalid log level {!r}; expected one of {}",
            args.log_level,
            ", ".join(config.LOG_LEVELS),
        )
        return EXIT_ERROR
    _configure_logging(args.log_level, args.log_file)

    try:
        return run(args.input, args.csv_out)
    except (OSError, UnicodeDecodeError) as e:
        diagnostics.error("{}", e)
        return EXIT_ERROR
    except Exception:
        diagnostics.exception("Unexpected failure")
        return EXIT_ERROR


def console_main() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    console_main()
