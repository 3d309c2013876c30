# adapters/json_store.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from core.errors import ParseError, StoreIOError
from core.records import Record, decode_collection, encode_collection
from settings.logging_setup import flog

ENCODING = "utf-8"


class JsonStore:
    """One JSON-array file holding the whole collection."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_exists(self) -> None:
        # append mode: creates a missing file, never truncates an existing one
        try:
            with self.path.open("ab"):
                pass
        except OSError as e:
            raise StoreIOError(f"cannot open file {self.path}: {e}") from e

    def read_bytes(self) -> bytes:
        try:
            with self.path.open("rb") as f:
                return f.read()
        except OSError as e:
            raise StoreIOError(f"cannot read file {self.path}: {e}") from e

    def load(self) -> List[Record]:
        raw = self.read_bytes()
        try:
            text = raw.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise ParseError(f"cannot parse data from JSON: {self.path} is not valid {ENCODING}: {e}") from e
        records = decode_collection(text)
        flog(f"loaded {len(records)} record(s) from {self.path}")
        return records

    def save(self, records: Iterable[Record]) -> None:
        payload = encode_collection(records).encode(ENCODING)
        # truncate + write in place: keeps the file's mode and any symlink pointing at it
        try:
            with self.path.open("wb") as f:
                f.write(payload)
        except OSError as e:
            raise StoreIOError(f"cannot write json to {self.path}: {e}") from e
        flog(f"saved {self.path} ({len(payload)} bytes)")
