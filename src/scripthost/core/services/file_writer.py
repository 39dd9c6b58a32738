from __future__ import annotations

"""
Script-Facing File Writer.

Stands in for the java.io.FileWriter API the legacy scripts were written
against: open, write, append, flush, close and getEncoding.
"""

import logging
from typing import Optional, TextIO

from scripthost.domain.constants import WRITER_ENCODING

logger = logging.getLogger(__name__)


class FileWriter:
    """Text writer over a single file, always encoded as UTF-8."""

    def __init__(self) -> None:
        self.stream: Optional[TextIO] = None
        self.path: str = ""

    def open(self, path: str, append: bool = True) -> "FileWriter":
        """
        Open ``path`` for writing.

        Args:
            path: File to write.
            append: Keep existing content when True, truncate when False.

        Returns:
            FileWriter: This writer, for chaining.
        """
        self.stream = open(path, "a" if append else "w", encoding=WRITER_ENCODING)
        self.path = path
        logger.debug(f"Opened '{path}' for {'append' if append else 'write'}")
        return self

    def close(self) -> None:
        if self.stream is not None:
            self.stream.close()
            self.stream = None

    def flush(self) -> None:
        if self.stream is not None:
            self.stream.flush()

    def get_encoding(self) -> str:
        return WRITER_ENCODING

    def append(self, text: str, start: int = 0, end: Optional[int] = None) -> None:
        """Write the ``text[start:end]`` slice."""
        self.write(text[start:end])

    def write(self, text: str) -> None:
        if self.stream is None:
            raise ValueError("FileWriter is not open")
        self.stream.write(text)

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
