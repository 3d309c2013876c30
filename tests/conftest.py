from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def users_file(tmp_path) -> Path:
    return tmp_path / "users.json"


@pytest.fixture()
def write_users(users_file):
    """Write a list of dicts to users_file as a compact JSON array."""
    def _write(items) -> Path:
        users_file.write_text(json.dumps(items, separators=(",", ":")), encoding="utf-8")
        return users_file
    return _write
