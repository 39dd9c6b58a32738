from __future__ import annotations

"""
Integration tests for the local filesystem backend.

Validates stat/list behavior and the translation of OS errors into the
host error taxonomy.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from scripthost.domain.errors import FileSystemError, PathNotFoundError, ReadFailureError
from scripthost.infra.fs import LocalFileSystem


def test_status_of_directory_and_file(tmp_path: Path) -> None:
    (tmp_path / "f.txt").write_text("x", encoding="utf-8")
    fs = LocalFileSystem()

    assert fs.status_of(str(tmp_path)).is_directory is True
    assert fs.status_of(str(tmp_path / "f.txt")).is_directory is False


def test_status_of_missing_path(tmp_path: Path) -> None:
    with pytest.raises(PathNotFoundError) as exc_info:
        LocalFileSystem().status_of(str(tmp_path / "nope"))
    assert exc_info.value.path == str(tmp_path / "nope")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_list_entries(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b.txt").write_text("", encoding="utf-8")
    assert sorted(LocalFileSystem().list_entries(str(tmp_path))) == ["a", "b.txt"]


def test_list_entries_on_file_is_read_failure(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("", encoding="utf-8")
    with pytest.raises(ReadFailureError):
        LocalFileSystem().list_entries(str(target))


def test_list_entries_permission_error(tmp_path: Path) -> None:
    with patch("os.listdir", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(ReadFailureError, match="Permission denied"):
            LocalFileSystem().list_entries(str(tmp_path))


def test_errors_are_os_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        LocalFileSystem().list_entries(str(tmp_path / "missing"))
    assert issubclass(PathNotFoundError, FileSystemError)


def test_write_read_copy_roundtrip(tmp_path: Path) -> None:
    fs = LocalFileSystem()
    fs.write_text(str(tmp_path / "a.txt"), "ascii only", "ascii")
    fs.copy_file(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert fs.read_text(str(tmp_path / "b.txt"), "utf8") == "ascii only"


def test_make_dir(tmp_path: Path) -> None:
    fs = LocalFileSystem()
    fs.make_dir(str(tmp_path / "new"))
    assert fs.exists(str(tmp_path / "new"))

    with pytest.raises(FileSystemError):
        fs.make_dir(str(tmp_path / "new"))


def test_failure_translation_chains_os_error(tmp_path: Path) -> None:
    (tmp_path / "taken").mkdir()
    with pytest.raises(FileSystemError) as exc_info:
        LocalFileSystem().make_dir(str(tmp_path / "taken"))

    assert not isinstance(exc_info.value, PathNotFoundError)
    assert isinstance(exc_info.value.__cause__, FileExistsError)
    assert exc_info.value.path == str(tmp_path / "taken")
