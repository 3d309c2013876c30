# core/errors.py
from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    MISSING_FLAG = "missing_flag"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    IO = "io"
    PARSE = "parse"
    DECODE = "decode"
    ENCODE = "encode"
    DUPLICATE_ID = "duplicate_id"


class RecordStoreError(Exception):
    """Base for everything perform() can raise. `kind` tells callers which one."""
    kind: ErrorKind


class MissingFlagError(RecordStoreError):
    kind = ErrorKind.MISSING_FLAG

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"-{flag} flag has to be specified")


class UnsupportedOperationError(RecordStoreError):
    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class StoreIOError(RecordStoreError):
    kind = ErrorKind.IO


class ParseError(RecordStoreError):
    kind = ErrorKind.PARSE


class DecodeError(RecordStoreError):
    kind = ErrorKind.DECODE


class EncodeError(RecordStoreError):
    kind = ErrorKind.ENCODE


class DuplicateIdError(RecordStoreError):
    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Item with id {record_id} already exists")
