# core/store.py
from __future__ import annotations
from typing import BinaryIO, List

from adapters.json_store import ENCODING, JsonStore
from core.errors import DuplicateIdError
from core.records import Record, decode_record, encode_record
from settings.logging_setup import flog


class RecordStore:
    """
    add / list / findById / remove over a JsonStore.

    Every call is a full load -> change -> save cycle. There is no locking:
    two processes working on the same file can lose each other's updates.
    Output goes to a binary sink (sys.stdout.buffer from the CLI).
    """

    def __init__(self, store: JsonStore):
        self.store = store

    def load(self) -> List[Record]:
        return self.store.load()

    def save(self, records: List[Record]) -> None:
        self.store.save(records)

    def add(self, item: str) -> Record:
        record = decode_record(item)
        records = self.load()
        if any(r.id == record.id for r in records):
            flog(f"add rejected: id {record.id} already exists")
            raise DuplicateIdError(record.id)
        records.append(record)
        self.save(records)
        flog(f"added id {record.id} ({len(records)} record(s) now)")
        return record

    def list(self, writer: BinaryIO) -> None:
        # raw echo, a malformed file is shown as-is
        writer.write(self.store.read_bytes())

    def find_by_id(self, record_id: str, writer: BinaryIO) -> int:
        found = 0
        for r in self.load():
            if r.id == record_id:
                writer.write(encode_record(r).encode(ENCODING))
                found += 1
        flog(f"findById {record_id}: {found} match(es)")
        return found

    def remove(self, record_id: str, writer: BinaryIO) -> bool:
        records = self.load()
        kept: List[Record] = []
        removed = False
        for r in tuple(records):
            if not removed and r.id == record_id:
                removed = True
                continue
            kept.append(r)

        if not removed:
            flog(f"remove: id {record_id} not found")
            writer.write(f"Item with id {record_id} not found".encode(ENCODING))
            return False

        self.save(kept)
        flog(f"removed id {record_id} ({len(kept)} record(s) left)")
        return True
