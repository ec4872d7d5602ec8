# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the StrictVal CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from strictval.cli.main import main

# ###############
# Test Helpers
# ###############

_SCHEMA = """\
structures:
  Hobby:
    fields:
      desc: {kind: string}
      difficulty: {kind: integer, positive: true}
  Person:
    fields:
      name: {kind: string, nonempty: true}
      hobbies:
        kind: array
        nonempty: true
        element: {kind: structure, ref: Hobby}
"""


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    """Invoke main() with the given arguments and return the exit code."""
    monkeypatch.setattr(sys, "argv", ["strictval", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _schema(tmp_path: Path, content: str = _SCHEMA) -> str:
    """Write the schema file and return its path."""
    path = tmp_path / "schema.yaml"
    path.write_text(content, encoding="utf-8")
    return str(path)


def _data(tmp_path: Path, name: str, content: str) -> str:
    """Write a data file and return its path."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


def test_check_valid_json(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A valid JSON document is reported as OK."""
    data = _data(
        tmp_path,
        "joe.json",
        json.dumps({"name": "Joe", "hobbies": [{"desc": "golfing", "difficulty": 20}]}),
    )
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 0
    assert "is a valid Person" in capsys.readouterr().out


def test_check_valid_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Non-JSON data files are read as YAML."""
    data = _data(tmp_path, "joe.yaml", "name: Joe\nhobbies:\n  - {desc: golfing, difficulty: 20}\n")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 0


def test_check_invalid_data_reports_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Invalid data exits with 1 and names the offending field."""
    data = _data(tmp_path, "bad.yaml", "name: Joe\nhobbies:\n  - {desc: golfing, difficulty: -3}\n")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 1
    err = capsys.readouterr().err
    assert "Invalid Person" in err
    assert "hobbies[0].difficulty must be > 0" in err


def test_check_empty_hobbies(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Field-level nonempty validators run on loaded data."""
    data = _data(tmp_path, "empty.json", '{"name": "Joe", "hobbies": []}')
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 1
    assert "hobbies must be non-empty" in capsys.readouterr().err


def test_check_unknown_structure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Naming an undeclared structure lists the declared ones."""
    data = _data(tmp_path, "joe.json", "{}")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Robot", data) == 1
    assert "unknown structure 'Robot' (declared: Hobby, Person)" in capsys.readouterr().err


def test_check_missing_schema(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing schema file exits with 1."""
    data = _data(tmp_path, "joe.json", "{}")
    assert _run(monkeypatch, "check", str(tmp_path / "none.yaml"), "Person", data) == 1
    assert "Declaration file not found" in capsys.readouterr().err


def test_check_invalid_schema(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Schema errors are reported before data is read."""
    schema = _schema(tmp_path, "structures:\n  A:\n    fields:\n      x: {kind: nope}\n")
    assert _run(monkeypatch, "check", schema, "A", str(tmp_path / "none.json")) == 1
    assert "invalid declaration document" in capsys.readouterr().err


def test_check_missing_data_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """An unreadable data file exits with 1."""
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", str(tmp_path / "none.json")) == 1
    assert "Cannot read data file" in capsys.readouterr().err


def test_check_malformed_json(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Malformed JSON data exits with 1."""
    data = _data(tmp_path, "broken.json", "{oops")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 1
    assert "Invalid JSON" in capsys.readouterr().err


def test_check_non_utf8_data(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A data file that is not UTF-8 exits with 1 instead of a traceback."""
    data = tmp_path / "latin1.json"
    data.write_bytes(b'{"name": "Jos\xe9", "hobbies": []}')
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", str(data)) == 1
    assert "Cannot read data file" in capsys.readouterr().err


def test_check_non_utf8_schema(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A declaration file that is not UTF-8 exits with 1."""
    schema = tmp_path / "latin1.yaml"
    schema.write_bytes(b"structures:\n  Caf\xe9: {}\n")
    data = _data(tmp_path, "joe.json", "{}")
    assert _run(monkeypatch, "check", str(schema), "Person", data) == 1
    assert "Cannot read declaration file" in capsys.readouterr().err


def test_check_non_mapping_data(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A data document that is not a mapping is invalid."""
    data = _data(tmp_path, "list.yaml", "- Joe\n")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data) == 1
    assert "must be deserialized from a mapping" in capsys.readouterr().err


def test_check_verbose(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--verbose still validates and succeeds."""
    data = _data(tmp_path, "joe.yaml", "name: Joe\nhobbies:\n  - {desc: golfing, difficulty: 1}\n")
    assert _run(monkeypatch, "check", _schema(tmp_path), "Person", data, "--verbose") == 0
