from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Implements the storage boundary consumed by the directory lister and the IO
facade on top of the 'os' and 'shutil' modules. Every OS-level failure is
translated into the host error taxonomy so that callers never depend on
platform-specific exception types.
"""

import os
import shutil
import stat
from dataclasses import dataclass
from typing import List, NoReturn, Protocol

from scripthost.domain.errors import FileSystemError, PathNotFoundError, ReadFailureError

# Mode used for directories created on behalf of scripts
DIRECTORY_MODE = 0o777

# -----------------------------------------------------------------------------
# BOUNDARY MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryStatus:
    """
    Minimal stat information required by the directory lister.

    Attributes:
        is_directory: True when the inspected path is a directory.
    """
    is_directory: bool


class DirectoryReader(Protocol):
    """Storage operations the directory lister depends on."""

    def status_of(self, path: str) -> EntryStatus: ...

    def list_entries(self, directory: str) -> List[str]: ...

# -----------------------------------------------------------------------------
# LOCAL BACKEND
# -----------------------------------------------------------------------------

class LocalFileSystem:
    """Filesystem backend bound to the local disk."""

    def status_of(self, path: str) -> EntryStatus:
        """
        Inspect a path.

        Raises:
            PathNotFoundError: The path does not exist.
            ReadFailureError: The path could not be inspected.
        """
        try:
            st = os.stat(path)
        except OSError as e:
            _raise_translated(e, path, "inspect")
        return EntryStatus(is_directory=stat.S_ISDIR(st.st_mode))

    def list_entries(self, directory: str) -> List[str]:
        """
        Return the entry names of a directory in directory-read order.

        Raises:
            PathNotFoundError: The directory does not exist.
            ReadFailureError: The directory could not be read.
        """
        try:
            return os.listdir(directory)
        except OSError as e:
            _raise_translated(e, directory, "list")

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_text(self, path: str, encoding: str) -> str:
        try:
            with open(path, "r", encoding=encoding) as f:
                return f.read()
        except OSError as e:
            _raise_translated(e, path, "read")

    def write_text(self, path: str, content: str, encoding: str) -> None:
        try:
            with open(path, "w", encoding=encoding) as f:
                f.write(content)
        except OSError as e:
            _raise_translated(e, path, "write", FileSystemError)

    def copy_file(self, source: str, destination: str) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            _raise_translated(e, source, "copy", FileSystemError)

    def make_dir(self, path: str) -> None:
        try:
            os.mkdir(path, DIRECTORY_MODE)
        except OSError as e:
            _raise_translated(e, path, "create directory", FileSystemError)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _raise_translated(
        error: OSError,
        path: str,
        action: str,
        failure_cls: type = ReadFailureError,
) -> NoReturn:
    """Re-raise an OS error as PathNotFoundError or ``failure_cls``."""
    message = f"Cannot {action} '{path}': {error.strerror or error}"
    if isinstance(error, FileNotFoundError):
        raise PathNotFoundError(message, path=path) from error
    raise failure_cls(message, path=path) from error
