# core/records.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List
import json

from core.errors import DecodeError, EncodeError, ParseError

RECORD_KEYS = ("id", "email", "age")

# compact on purpose: the file is one JSON array, findById concatenates objects
_SEPARATORS = (",", ":")


def _norm_id(v: Any) -> str:
    # bool is an int subclass, keep it out
    if isinstance(v, bool):
        raise ValueError(f"id must be a string or integer, got {v!r}")
    if isinstance(v, int):
        return str(v)
    if isinstance(v, str):
        if not v:
            raise ValueError("id is empty")
        return v
    raise ValueError(f"id must be a string or integer, got {type(v).__name__}")


@dataclass(frozen=True)
class Record:
    id: str
    email: str
    age: int

    @classmethod
    def from_dict(cls, obj: Any) -> "Record":
        if not isinstance(obj, dict):
            raise ValueError(f"record must be a JSON object, got {type(obj).__name__}")
        missing = [k for k in RECORD_KEYS if k not in obj]
        if missing:
            raise ValueError(f"record is missing: {', '.join(missing)}")

        email = obj["email"]
        if not isinstance(email, str):
            raise ValueError(f"email must be a string, got {type(email).__name__}")
        age = obj["age"]
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValueError(f"age must be an integer, got {age!r}")

        return cls(id=_norm_id(obj["id"]), email=email, age=age)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "age": self.age}


def decode_record(text: str) -> Record:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"cannot decode item: {e}") from e
    try:
        return Record.from_dict(obj)
    except ValueError as e:
        raise DecodeError(f"cannot decode item: {e}") from e


def encode_record(record: Record) -> str:
    try:
        return json.dumps(record.to_dict(), ensure_ascii=False, separators=_SEPARATORS)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"cannot encode record {record.id}: {e}") from e


def decode_collection(text: str) -> List[Record]:
    """
    Parse the backing file content.

    Empty (or whitespace-only) content and a bare `null` mean "no records yet".
    Anything else has to be a JSON array of record objects.
    """
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"cannot parse data from JSON: {e}") from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(f"cannot parse data from JSON: expected an array, got {type(data).__name__}")

    out: List[Record] = []
    for i, item in enumerate(data):
        try:
            out.append(Record.from_dict(item))
        except ValueError as e:
            raise ParseError(f"cannot parse data from JSON: item {i}: {e}") from e
    return out


def encode_collection(records: Iterable[Record]) -> str:
    try:
        return json.dumps([r.to_dict() for r in records], ensure_ascii=False, separators=_SEPARATORS)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"error marshalling: {e}") from e
