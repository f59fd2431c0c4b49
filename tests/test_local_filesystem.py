"""Tests for the local disk file-system and clock ports."""

import logging
import re
from pathlib import Path

import pytest

from minigit.fs import Clock, FileSystem, LocalFileSystem, SystemClock


@pytest.fixture
def filesystem():
    return LocalFileSystem()


def test_local_filesystem_satisfies_protocol(filesystem):
    assert isinstance(filesystem, FileSystem)
    assert isinstance(SystemClock(), Clock)


def test_create_directory_is_idempotent(filesystem, tmp_path):
    target = tmp_path / "a" / "b"
    filesystem.create_directory(str(target))
    filesystem.create_directory(str(target))
    assert filesystem.directory_exists(str(target))


def test_directory_exists_false_for_file(filesystem, tmp_path):
    f = tmp_path / "afile.txt"
    f.write_text("hello")
    assert filesystem.directory_exists(str(f)) is False


def test_list_regular_files_non_recursive_and_excludes_metadata(filesystem, tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_text("n")
    (tmp_path / ".minigit").mkdir()
    (tmp_path / ".minigit" / "inner").write_text("meta")
    (tmp_path / ".minigit.bak").write_text("meta")

    assert filesystem.list_regular_files(str(tmp_path)) == ["a.txt", "b.txt"]


def test_list_regular_files_missing_directory(filesystem, tmp_path):
    assert filesystem.list_regular_files(str(tmp_path / "missing")) == []


def test_custom_metadata_dir_name(tmp_path):
    (tmp_path / ".vcs").mkdir()
    (tmp_path / ".minigit").write_text("tracked now")
    filesystem = LocalFileSystem(metadata_dir_name=".vcs")
    assert filesystem.list_regular_files(str(tmp_path)) == [".minigit"]


def test_read_all_bytes_returns_content(filesystem, tmp_path):
    f = tmp_path / "a.txt"
    f.write_text("line1\nline2\n", encoding="utf-8")
    assert filesystem.read_all_bytes(str(f)) == "line1\nline2\n"


def test_read_all_bytes_unreadable_degrades_to_empty(filesystem, tmp_path, caplog):
    missing = tmp_path / "gone.txt"
    with caplog.at_level(logging.WARNING, logger="minigit"):
        assert filesystem.read_all_bytes(str(missing)) == ""
    assert "Cannot read file" in caplog.text


def test_read_all_bytes_permission_error(filesystem, tmp_path, monkeypatch):
    f = tmp_path / "secret.txt"
    f.write_text("hidden")
    original = Path.read_bytes

    def fake_read_bytes(self):
        if self.name == "secret.txt":
            raise PermissionError(13, "Permission denied")
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", fake_read_bytes)
    assert filesystem.read_all_bytes(str(f)) == ""


def test_read_all_bytes_preserves_undecodable_bytes(filesystem, tmp_path):
    f = tmp_path / "bin.dat"
    f.write_bytes(b"\xff\x00abc")
    content = filesystem.read_all_bytes(str(f))
    assert content.encode("utf-8", errors="surrogateescape") == b"\xff\x00abc"


def test_system_clock_format():
    stamp = SystemClock().current_timestamp()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", stamp)
