# settings/logging_setup.py
from __future__ import annotations
import logging
import platform
import sys
from datetime import datetime
from pathlib import Path
from contextlib import contextmanager

FMT = "%(asctime)s [%(levelname)s] %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: Path, enable_logs: bool) -> logging.FileHandler | None:
    """Attach a timestamped file handler to the root logger. Nothing is ever logged to stdout."""
    if not enable_logs:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{ts}.log"

    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=FMT, datefmt=DATEFMT))
    root = logging.getLogger()
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)
    root.addHandler(handler)

    logging.info("=== user-records start ===")
    logging.info("Python exe : %s", sys.executable)
    logging.info("Python ver : %s", sys.version.replace("\n", " "))
    logging.info("Platform   : %s %s (%s)", platform.system(), platform.release(), platform.machine())
    return handler


def flog(msg: str, level: int = logging.INFO) -> None:
    if logging.getLogger().handlers:
        logging.log(level, msg)


@contextmanager
def cli_logging(log_dir: Path, enable_logs: bool):
    handler = setup_logging(log_dir, enable_logs=enable_logs)
    logfile = Path(handler.baseFilename) if handler is not None else None
    try:
        yield logfile
    finally:
        if handler is not None:
            flog(f"Log saved to: {logfile}")
            logging.getLogger().removeHandler(handler)
            handler.close()
