from __future__ import annotations

"""
Script Loader.

Reads, compiles and executes script files inside a shared namespace, the
Python counterpart of the legacy engine's ``load`` primitive. Scripts see
each other's top-level definitions because they all run in one namespace.
"""

import logging
from typing import Any, Callable, Dict, List

from scripthost.domain.errors import FileSystemError, ScriptLoadError

logger = logging.getLogger(__name__)


class ScriptLoader:
    """
    Executes script files in a shared global namespace.

    Args:
        namespace: Globals every loaded script runs in.
        read_source: Returns the text of a script file.
    """

    def __init__(self, namespace: Dict[str, Any], read_source: Callable[[str], str]) -> None:
        self._namespace = namespace
        self._read_source = read_source
        self.loaded: List[str] = []

    def load(self, path: str) -> None:
        """
        Execute the script at ``path``.

        Errors raised by the script itself propagate unchanged.

        Raises:
            ScriptLoadError: The file could not be read or does not compile.
        """
        try:
            source = self._read_source(path)
        except FileSystemError as e:
            raise ScriptLoadError(f"Cannot read script '{path}': {e}", path) from e

        try:
            code = compile(source, path, "exec")
        except SyntaxError as e:
            raise ScriptLoadError(f"Cannot compile script '{path}': {e}", path) from e

        logger.debug(f"Loading script: {path}")
        self.loaded.append(path)
        exec(code, self._namespace)
