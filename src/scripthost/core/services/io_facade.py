from __future__ import annotations

"""
IO Facade.

The IO object exposed to legacy scripts: reading, writing and copying files,
creating directories, listing directory trees and loading further scripts
relative to the host base directory. All state (encoding, base directory,
separator) lives on the instance; nothing is shared between hosts.
"""

import logging
import os
from typing import Callable, List, Optional, Sequence

from scripthost.core.services.file_writer import FileWriter
from scripthost.core.services.lister import TreeLister
from scripthost.domain.config import HostConfig
from scripthost.domain.constants import SUPPORTED_ENCODINGS
from scripthost.domain.errors import UnsupportedEncodingError
from scripthost.domain.path_models import FilePath
from scripthost.infra.fs import LocalFileSystem

logger = logging.getLogger(__name__)


class HostIO:
    """
    Filesystem operations available to scripts.

    Args:
        config: Runtime context providing base directory, separator and defaults.
        load: Primitive executing a script file, used by include/include_dir.
        fs: Storage backend, the local disk by default.
    """

    def __init__(
            self,
            config: HostConfig,
            load: Callable[[str], None],
            fs: Optional[LocalFileSystem] = None,
    ) -> None:
        self._config = config
        self._load = load
        self._fs = fs if fs is not None else LocalFileSystem()
        self._lister = TreeLister(self._fs, separator=config.separator)
        self.encoding: str = config.encoding
        if config.encoding not in SUPPORTED_ENCODINGS.values():
            self.set_encoding(config.encoding)

    # -------------------------------------------------------------------------
    # READ / WRITE
    # -------------------------------------------------------------------------

    def save_file(self, out_dir: str, file_name: str, content: str) -> None:
        """Create ``file_name`` inside ``out_dir`` holding ``content``."""
        self._fs.write_text(out_dir + self._config.separator + file_name, content, self.encoding)

    def read_file(self, path: str) -> str:
        return self._fs.read_text(path, self.encoding)

    def copy_file(self, in_file: str, out_dir: str, file_name: Optional[str] = None) -> None:
        """
        Copy ``in_file`` into ``out_dir``, keeping its name unless one is given.

        A missing source is skipped without error.
        """
        if file_name is None:
            file_name = FilePath.file_name_of(in_file)
        source = os.path.normpath(in_file)
        destination = os.path.normpath(out_dir + "/" + file_name)

        if not self._fs.exists(source):
            logger.debug(f"Copy source not found, skipping: {source}")
            return
        self._fs.copy_file(source, destination)

    def open(self, path: str, append: bool = True) -> FileWriter:
        return FileWriter().open(path, append)

    # -------------------------------------------------------------------------
    # DIRECTORIES
    # -------------------------------------------------------------------------

    def mk_path(self, segments: Sequence[str]) -> None:
        """
        Create each missing directory of a nested path.

        Args:
            segments: Path components in order. Split strings beforehand
                      (see ``scripthost.domain.path_models.split_path``).
        """
        make = ""
        for segment in segments:
            make += segment + self._config.separator
            if not self.exists(make):
                self.make_dir(make)

    def make_dir(self, path: str) -> None:
        self._fs.make_dir(path)

    def ls(self, directory: str, max_depth: Optional[int] = None) -> List[str]:
        """List the files under ``directory``; see TreeLister.list_files."""
        depth = self._config.list_depth if max_depth is None else max_depth
        return self._lister.list_files(directory, depth)

    def exists(self, path: str) -> bool:
        return self._fs.exists(path)

    # -------------------------------------------------------------------------
    # ENCODING
    # -------------------------------------------------------------------------

    def set_encoding(self, encoding: str) -> None:
        """
        Select the codec used by read_file and save_file.

        Any name mentioning UTF-8 or ASCII (case-insensitive) is accepted.

        Raises:
            UnsupportedEncodingError: For every other encoding name.
        """
        requested = (encoding or "").upper()
        for alias, codec in SUPPORTED_ENCODINGS.items():
            if alias in requested:
                self.encoding = codec
                return
        raise UnsupportedEncodingError(encoding)

    # -------------------------------------------------------------------------
    # SCRIPT LOADING
    # -------------------------------------------------------------------------

    def include(self, relative_path: str) -> None:
        """Load a script relative to the host base directory."""
        self._load(self._config.pwd + relative_path)

    def include_dir(self, path: str) -> None:
        """Load every script listed under a base-relative directory."""
        if not path:
            return
        suffix = self._config.script_suffix.lower()
        for lib in self.ls(self._config.pwd + path):
            if lib.lower().endswith(suffix):
                self._load(lib)
