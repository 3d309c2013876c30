# cli/main.py
from __future__ import annotations
import logging
import sys
from typing import Sequence

from settings.arguments import parse_args
from settings.config import AppConfig
from settings.logging_setup import cli_logging, flog
from cli.ui import eprint, print_config, print_error
from cli.command import perform
from core.errors import RecordStoreError


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = AppConfig.from_args(args)

    if args.show_config:
        print_config(cfg)
        return 0

    sink = sys.stdout.buffer
    with cli_logging(cfg.logs_dir, enable_logs=args.logs) as logfile:
        if args.debug and logfile is not None:
            eprint(f"(log: {logfile})")
        try:
            perform(args, sink)
        except RecordStoreError as e:
            flog(f"[FAIL] {e.kind.value}: {e}", level=logging.ERROR)
            print_error(e, debug=args.debug)
            return 1
        finally:
            sink.flush()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
