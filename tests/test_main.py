from __future__ import annotations

import json
import logging

from cli.main import main


def test_add_and_list(users_file, capsys):
    item = '{"id":"1","email":"a@x.com","age":30}'
    assert main(["-operation", "add", "-fileName", str(users_file), "-item", item]) == 0
    assert capsys.readouterr().out == ""

    assert main(["-operation", "list", "-fileName", str(users_file)]) == 0
    assert capsys.readouterr().out == "[" + item + "]"


def test_find_by_id_prints_record(write_users, capsys):
    path = write_users([{"id": "1", "email": "a@x.com", "age": 30}])
    assert main(["-operation", "findById", "-fileName", str(path), "-id", "1"]) == 0
    assert json.loads(capsys.readouterr().out) == {"id": "1", "email": "a@x.com", "age": 30}


def test_remove_absent_is_success(write_users, capsys):
    path = write_users([])
    assert main(["-operation", "remove", "-fileName", str(path), "-id", "5"]) == 0
    assert capsys.readouterr().out == "Item with id 5 not found"


def test_missing_operation_exits_non_zero(write_users, capsys):
    path = write_users([{"id": "1", "email": "a@x.com", "age": 30}])
    before = path.read_bytes()
    assert main(["-fileName", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: -operation flag has to be specified" in captured.err
    assert path.read_bytes() == before


def test_duplicate_add_exits_non_zero(write_users, capsys):
    path = write_users([{"id": "1", "email": "a@x.com", "age": 30}])
    rc = main(["-operation", "add", "-fileName", str(path), "-item", '{"id":"1","email":"b@x.com","age":2}', "-d"])
    assert rc == 1
    err = capsys.readouterr().err
    assert "Item with id 1 already exists" in err
    assert "duplicate_id" in err


def test_show_config(capsys):
    assert main(["--show-config"]) == 0
    assert capsys.readouterr().out.startswith("Resolved configuration:")


def test_logs_flag_writes_log_file(users_file, tmp_path):
    log_dir = tmp_path / "logs"
    root = logging.getLogger()
    handlers_before = list(root.handlers)

    rc = main(["-operation", "list", "-fileName", str(users_file), "-l", "--log-dir", str(log_dir)])

    assert rc == 0
    logs = list(log_dir.glob("*.log"))
    assert len(logs) == 1
    text = logs[0].read_text(encoding="utf-8")
    assert "operation=list" in text
    assert root.handlers == handlers_before


def test_list_echoes_non_utf8_bytes(users_file, capsysbinary):
    raw = b'[{"id":"1","email":"\xff@x.com","age":30}]'
    users_file.write_bytes(raw)
    assert main(["-operation", "list", "-fileName", str(users_file)]) == 0
    assert capsysbinary.readouterr().out == raw


def test_find_by_id_on_non_utf8_file_reports_error(users_file, capsysbinary):
    users_file.write_bytes(b"\xff\xfe garbage")
    assert main(["-operation", "findById", "-fileName", str(users_file), "-id", "1"]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert captured.err.startswith(b"Error: cannot parse data from JSON")


def test_failure_is_logged_at_error_level(tmp_path, capsys):
    log_dir = tmp_path / "logs"
    rc = main(["-fileName", str(tmp_path / "users.json"), "-l", "--log-dir", str(log_dir)])
    assert rc == 1
    text = next(log_dir.glob("*.log")).read_text(encoding="utf-8")
    assert "[ERROR] [FAIL] missing_flag: -operation flag has to be specified" in text
