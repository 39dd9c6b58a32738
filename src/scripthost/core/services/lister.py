from __future__ import annotations

"""
Bounded-Depth Directory Lister.

Enumerates the non-hidden files reachable from a starting directory within a
maximum number of directory levels, producing a flat list of path strings in
depth-first order. Entries inside one directory keep the order the backend
returns them in; that order is filesystem dependent and deliberately left
unsorted.
"""

import logging
import re
from typing import List, Optional

from scripthost.domain.constants import DEFAULT_LIST_DEPTH, DEFAULT_SEPARATOR
from scripthost.infra.fs import DirectoryReader, LocalFileSystem

logger = logging.getLogger(__name__)

# A dot followed by anything but another dot or a separator
_HIDDEN_RX = re.compile(r"^\.[^./\\]")


def is_hidden(name: str) -> bool:
    """Return True for conventional dot-files such as '.git' or '.hidden.py'."""
    return bool(_HIDDEN_RX.match(name))


class TreeLister:
    """
    Recursive file enumerator over a filesystem backend.

    Args:
        fs: Backend providing ``status_of`` and ``list_entries``.
        separator: Separator used to join the returned paths. The backend
            is always addressed with forward slashes.
    """

    def __init__(self, fs: Optional[DirectoryReader] = None, separator: str = DEFAULT_SEPARATOR) -> None:
        self._fs = fs if fs is not None else LocalFileSystem()
        self._sep = separator

    def list_files(self, start_dir: str, max_depth: int = DEFAULT_LIST_DEPTH) -> List[str]:
        """
        List every non-hidden file below ``start_dir``.

        A file start yields a single-element list. For a directory start the
        immediate files are always listed; a subdirectory is entered only
        while its level below the start is lower than ``max_depth``, and
        subdirectories past the limit are omitted entirely.

        Args:
            start_dir: File or directory to list.
            max_depth: Number of directory levels the listing may descend into.

        Returns:
            List[str]: Paths of the files found, depth-first.

        Raises:
            PathNotFoundError: ``start_dir`` or a visited entry vanished.
            ReadFailureError: A directory could not be read. No partial
                result is returned.
        """
        if not self._fs.status_of(start_dir).is_directory:
            return [start_dir]

        found: List[str] = []
        self._walk(start_dir, [start_dir], max_depth, found)
        logger.debug(f"Listed {len(found)} file(s) under '{start_dir}' (depth {max_depth})")
        return found

    def _walk(self, directory: str, trail: List[str], max_depth: int, found: List[str]) -> None:
        """Depth-first visit of ``directory``, whose components are ``trail``."""
        sep = self._sep

        for name in self._fs.list_entries(directory):
            if is_hidden(name):
                continue

            # Backend paths always use '/'; the separator only shapes output
            entry = "/".join(trail) + "/" + name
            if self._fs.status_of(entry).is_directory:
                trail.append(name)
                if len(trail) - 1 < max_depth:
                    self._walk("/".join(trail), trail, max_depth, found)
                trail.pop()
            else:
                listed = sep.join(trail) + sep + name
                # Listing the root yields '//name'
                found.append(listed.replace(sep + sep, sep, 1))
