from __future__ import annotations

import hashlib
import io
from pathlib import Path

import pytest

from core.cli import main, read_serial


def test_read_serial_takes_first_word() -> None:
    assert read_serial(io.StringIO("AE1234E extra words\n")) == "AE1234E"


def test_read_serial_blank_line_and_eof_are_empty() -> None:
    assert read_serial(io.StringIO("   \n")) == ""
    assert read_serial(io.StringIO("")) == ""


def test_cli_reads_stdin_and_prints_digest(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("L12345678E\n"))

    assert main([]) == 0

    out = capsys.readouterr().out
    assert out == hashlib.sha256(b"L12345678E").hexdigest() + "\n"


def test_cli_serial_flag_with_plan(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--serial", "EE", "--plan"]) == 0

    lines = capsys.readouterr().out.splitlines()
    first = hashlib.md5(b"EE").hexdigest()
    assert lines == [
        "count=2 single_pass=False iterations=2",
        hashlib.md5(first.encode("utf-8")).hexdigest(),
    ]


def test_cli_empty_stdin_hashes_empty_serial(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main([]) == 0
    assert capsys.readouterr().out.strip() == hashlib.sha256(b"").hexdigest()


def test_cli_uses_config_algorithms(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "app.yaml"
    p.write_text("hashing:\n  single_algorithm: sha1\n", encoding="utf-8")

    assert main(["--config", str(p), "--serial", "E"]) == 0
    assert capsys.readouterr().out.strip() == hashlib.sha1(b"E").hexdigest()


def test_cli_bad_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml"), "--serial", "E"]) == 2
    assert capsys.readouterr().out == ""


def test_cli_unknown_algorithm_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "app.yaml"
    p.write_text("hashing:\n  iterative_algorithm: nohash\n", encoding="utf-8")

    assert main(["--config", str(p), "--serial", "EE"]) == 2
    assert capsys.readouterr().out == ""


def test_cli_unusable_algorithm_exits_2(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    real_new = hashlib.new

    def fake_new(name: str, *args: object, **kwargs: object):  # type: ignore[no-untyped-def]
        if name == "sha1":
            raise ValueError("unsupported hash type sha1")
        return real_new(name, *args, **kwargs)

    monkeypatch.setattr("hashing.serial.hashlib.new", fake_new)
    p = tmp_path / "app.yaml"
    p.write_text("hashing:\n  single_algorithm: sha1\n", encoding="utf-8")

    assert main(["--config", str(p), "--serial", "E"]) == 2
    assert capsys.readouterr().out == ""
