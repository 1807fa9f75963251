"""Tests for the command line entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from utilkit.main import main

HELLO_MD5 = "5D41402ABC4B2A76B9719D911017C592"


class TestSearch:
    def test_ranks_file_lines(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "names.txt"
        source.write_text("bar\nfoo bar\nfood\n")
        assert main(["search", "foo", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ["1014\tfoo bar", "1013\tfood"]

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("getbarclass\ngetBarClass\n"))
        assert main(["search", "gbc", "--limit", "1"]) == 0
        assert capsys.readouterr().out == "1022\tgetBarClass\n"

    def test_no_results_exit_code(self, tmp_path: Path) -> None:
        source = tmp_path / "names.txt"
        source.write_text("bar\n")
        assert main(["search", "foo", str(source)]) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["search", "foo", str(tmp_path / "nope.txt")]) == 2


class TestHash:
    def test_single_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "a.txt").write_bytes(b"hello")
        assert main(["hash", str(tmp_path / "a.txt")]) == 0
        assert capsys.readouterr().out == f"{HELLO_MD5}  a.txt\n"

    def test_directory_to_file_then_verify(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        data = tmp_path / "data"
        data.mkdir()
        (data / "a.txt").write_bytes(b"hello")
        sums = data / "sums.md5"
        assert main(["hash", str(data), "-o", str(sums)]) == 0
        assert sums.read_text() == f"{HELLO_MD5}  a.txt\n"

        assert main(["verify", str(sums)]) == 0
        (data / "a.txt").write_bytes(b"changed")
        assert main(["verify", str(sums)]) == 1
        assert "CHANGED\ta.txt" in capsys.readouterr().out

    def test_list_outside_hashed_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        data = tmp_path / "data"
        data.mkdir()
        (data / "x.txt").write_bytes(b"hello")
        lists = tmp_path / "lists"
        lists.mkdir()
        sums = lists / "l.md5"
        assert main(["hash", str(data / "x.txt"), "-o", str(sums)]) == 0
        assert sums.read_text() == f"{HELLO_MD5}  ../data/x.txt\n"

        assert main(["verify", str(sums)]) == 0
        assert "MISSING" not in capsys.readouterr().out

    def test_malformed_hash_file(self, tmp_path: Path) -> None:
        sums = tmp_path / "sums.md5"
        sums.write_text("garbage\n")
        assert main(["verify", str(sums)]) == 2


class TestBasex:
    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["basex", "255", "--base", "16"]) == 0
        assert capsys.readouterr().out == "FF\n"

    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["basex", "ZZ", "--decode"]) == 0
        assert capsys.readouterr().out == "1295\n"

    def test_invalid_input(self) -> None:
        assert main(["basex", "G", "--base", "16", "--decode"]) == 2


class TestWeekdate:
    def test_given_date(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["weekdate", "2021-01-01"]) == 0
        assert capsys.readouterr().out == "2020-W53-5\n"

    def test_bad_date(self) -> None:
        assert main(["weekdate", "01/01/2021"]) == 2


def test_unknown_command_exits() -> None:
    with pytest.raises(SystemExit):
        main(["frobnicate"])
