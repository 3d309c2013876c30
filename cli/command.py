# cli/command.py
from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from settings.arguments import Arguments
from settings.logging_setup import flog
from adapters.json_store import JsonStore
from core.errors import MissingFlagError, UnsupportedOperationError
from core.store import RecordStore


class Operation(str, Enum):
    ADD = "add"
    LIST = "list"
    FIND_BY_ID = "findById"
    REMOVE = "remove"


def _operation(name: str) -> Operation:
    try:
        return Operation(name)
    except ValueError:
        raise UnsupportedOperationError(name) from None


def perform(args: Arguments, writer: BinaryIO) -> None:
    """
    Validate the parsed flags, make sure the file exists, run one operation.

    All flag checks happen before the file is touched, so a bad command line
    never creates or modifies anything. Errors propagate to the caller.
    """
    if not args.file_name:
        raise MissingFlagError("fileName")
    if not args.operation:
        raise MissingFlagError("operation")
    op = _operation(args.operation)

    if op is Operation.ADD and not args.item:
        raise MissingFlagError("item")
    if op in (Operation.FIND_BY_ID, Operation.REMOVE) and not args.id:
        raise MissingFlagError("id")

    store = JsonStore(Path(args.file_name))
    store.ensure_exists()
    records = RecordStore(store)
    flog(f"operation={op.value} file={store.path}")

    if op is Operation.ADD:
        records.add(args.item)
    elif op is Operation.LIST:
        records.list(writer)
    elif op is Operation.FIND_BY_ID:
        records.find_by_id(args.id, writer)
    else:
        records.remove(args.id, writer)
