# cli/ui.py
from __future__ import annotations
import sys

from settings.config import AppConfig
from core.errors import RecordStoreError


def cprint(msg: str) -> None:
    # single place to control console output
    print(msg, flush=True)


def eprint(msg: str) -> None:
    # stdout is the output sink, diagnostics go to stderr
    print(msg, file=sys.stderr, flush=True)


def print_error(err: RecordStoreError, debug: bool = False) -> None:
    eprint(f"Error: {err}")
    if debug:
        eprint(f"(kind: {err.kind.value})")


def print_config(cfg: AppConfig) -> None:
    for line in cfg.pretty_lines():
        cprint(line)
