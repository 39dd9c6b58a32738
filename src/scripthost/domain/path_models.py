from __future__ import annotations

"""
Filesystem Path Value Model.

Parses absolute path strings into root, directory segments and file name,
collapses relative markers and re-serializes with a configurable separator.
The model is purely string based: it never touches the filesystem and never
raises for malformed input, degrading to empty fields instead.
"""

import re
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from scripthost.domain.constants import DEFAULT_SEPARATOR

# Input is split on both separators regardless of the configured one
_SPLIT_RX = re.compile(r"[\\/]")

_CURRENT_DIR = "."
_PARENT_DIR = ".."

# -----------------------------------------------------------------------------
# SEGMENT RESOLUTION
# -----------------------------------------------------------------------------

def resolve_segments(segments: Iterable[str]) -> List[str]:
    """
    Collapse '.' and '..' markers out of a directory segment sequence.

    Single left-to-right pass: '..' drops the most recently accepted
    segment (or does nothing when none remain), '.' is skipped and any
    other segment is kept.

    Args:
        segments: Raw directory names in path order.

    Returns:
        List[str]: Normalized segments.
    """
    resolved: List[str] = []
    for segment in segments:
        if segment == _PARENT_DIR:
            if resolved:
                resolved.pop()
        elif segment != _CURRENT_DIR:
            resolved.append(segment)
    return resolved


def split_path(raw_path: str) -> List[str]:
    """Split a path string on both forward and backward slashes."""
    return _SPLIT_RX.split(raw_path)

# -----------------------------------------------------------------------------
# VALUE TYPE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FilePath:
    """
    Immutable, normalized representation of a filesystem path.

    Attributes:
        root: First path component followed by the separator. This is the
              bare separator for absolute POSIX paths and e.g. 'C:' plus
              separator for drive paths.
        segments: Resolved directory names, never containing '.' or '..'.
        file_name: Trailing file name, empty when the path is a directory.
        separator: Character used when serializing.
    """
    root: str = DEFAULT_SEPARATOR
    segments: Tuple[str, ...] = ()
    file_name: str = ""
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(resolve_segments(self.segments)))

    @classmethod
    def parse(cls, raw_path: str, separator: str = DEFAULT_SEPARATOR) -> "FilePath":
        """
        Build a normalized path from a raw string.

        The first token becomes the root, the last remaining token the file
        name and everything in between is resolved into segments.

        Args:
            raw_path: Path string, mixed separators tolerated.
            separator: Output separator, defaults to '/'.

        Returns:
            FilePath: The normalized value.
        """
        separator = separator or DEFAULT_SEPARATOR
        parts = split_path(raw_path or "")

        root = separator
        file_name = ""
        middle: List[str] = []

        if parts:
            root = parts.pop(0) + separator
        if parts:
            file_name = parts.pop()
        if parts:
            middle = parts

        return cls(
            root=root,
            segments=tuple(resolve_segments(middle)),
            file_name=file_name,
            separator=separator,
        )

    def to_dir(self) -> "FilePath":
        """Return the same path with the file name trimmed off."""
        if not self.file_name:
            return self
        return replace(self, file_name="")

    def up_dir(self) -> "FilePath":
        """Return the parent directory of this path's directory."""
        directory = self.to_dir()
        if not directory.segments:
            return directory
        return replace(directory, segments=directory.segments[:-1])

    def __str__(self) -> str:
        trailer = self.separator if self.segments else ""
        return self.root + self.separator.join(self.segments) + trailer + self.file_name

    # -------------------------------------------------------------------------
    # STRING HELPERS
    # -------------------------------------------------------------------------

    @staticmethod
    def file_name_of(path: str) -> str:
        """Return the part of ``path`` after its last separator."""
        return path[_last_separator(path) + 1:]

    @staticmethod
    def file_extension(file_name: str) -> str:
        """
        Return the lower-cased text after the last dot of ``file_name``.

        A name without any dot is returned whole, lower-cased.
        """
        return file_name.split(".")[-1].lower()

    @staticmethod
    def dir_of(path: str) -> str:
        """Return the part of ``path`` before its last separator, or ''."""
        index = _last_separator(path)
        if index <= 0:
            return ""
        return path[:index]


def _last_separator(path: str) -> int:
    return max(path.rfind("/"), path.rfind("\\"))
