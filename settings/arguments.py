# settings/arguments.py
from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Arguments:
    """Parsed command line. Required-ness is checked by cli.command.perform, not argparse."""
    operation: Optional[str] = None
    file_name: Optional[str] = None
    item: Optional[str] = None
    id: Optional[str] = None
    logs: bool = False
    debug: bool = False
    show_config: bool = False
    log_dir: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    # single-dash long flags (-operation, -fileName, ...) are the tool's public interface
    p = argparse.ArgumentParser(
        prog="user-records",
        description="Manage user records (id, email, age) stored as a JSON array in one file.",
        allow_abbrev=False,
    )
    p.add_argument(
        "-operation",
        dest="operation",
        help="add | list | findById | remove",
    )
    p.add_argument(
        "-fileName",
        dest="file_name",
        help="Path to the JSON file (created if missing, never truncated on open)",
    )
    p.add_argument(
        "-item",
        dest="item",
        help='Record JSON for add, e.g. {"id":"1","email":"a@x.com","age":30}',
    )
    p.add_argument(
        "-id",
        dest="id",
        help="Record id for findById / remove",
    )
    p.add_argument(
        "-l",
        "--logs",
        action="store_true",
        default=False,
        help="Write a log file for this run",
    )
    p.add_argument(
        "--log-dir",
        dest="log_dir",
        help="Where log files go (overrides USER_RECORDS_LOG_DIR)",
    )
    p.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="Print debug info to stderr",
    )
    p.add_argument(
        "--show-config",
        action="store_true",
        help="print resolved config and exit",
    )
    return p


LONG_SINGLE_DASH = ("-operation", "-fileName", "-item", "-id")


def _reject_abbreviations(p: argparse.ArgumentParser, argv: Sequence[str]) -> None:
    # argparse < 3.12 still prefix-matches single-dash long flags with allow_abbrev=False
    for tok in argv:
        if tok == "--":
            break
        name = tok.split("=", 1)[0]
        if len(name) < 2 or not name.startswith("-") or name.startswith("--") or name in LONG_SINGLE_DASH:
            continue
        if any(flag.startswith(name) for flag in LONG_SINGLE_DASH):
            p.error(f"unrecognized arguments: {tok}")


def parse_args(argv: Sequence[str] | None = None) -> Arguments:
    p = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    _reject_abbreviations(p, argv)
    ns = p.parse_args(argv)
    return Arguments(
        operation=ns.operation,
        file_name=ns.file_name,
        item=ns.item,
        id=ns.id,
        logs=ns.logs,
        debug=ns.debug,
        show_config=ns.show_config,
        log_dir=ns.log_dir,
    )
