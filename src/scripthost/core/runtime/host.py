from __future__ import annotations

"""
Script Host Runtime.

Assembles the namespace legacy scripts run in (load, print, quit, arguments,
LOG, SYS, IO, FilePath, FileWriter, ENV), includes the bootstrap scripts and
invokes the entry function. Each host owns its namespace and collaborators;
no process-wide state is touched.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

from scripthost.core.runtime.loader import ScriptLoader
from scripthost.core.services.file_writer import FileWriter
from scripthost.core.services.host_log import HostLog
from scripthost.core.services.io_facade import HostIO
from scripthost.domain.config import HostConfig
from scripthost.domain.constants import TEMPLATE_DIR_ENV_VAR
from scripthost.domain.errors import HostExit, ScriptHostError
from scripthost.domain.path_models import FilePath
from scripthost.infra.fs import LocalFileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM INFORMATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SysInfo:
    """
    The SYS object seen by scripts.

    Attributes:
        slash: Path separator in use.
        pwd: Absolute base directory of the scripts, ending with ``slash``.
    """
    slash: str
    pwd: str

# -----------------------------------------------------------------------------
# HOST
# -----------------------------------------------------------------------------

class ScriptHost:
    """
    One isolated execution environment for legacy scripts.

    Args:
        config: Runtime context.
        fs: Storage backend shared by IO and script loading.
        stdout: Stream receiving ``print`` output, sys.stdout by default.
    """

    def __init__(
            self,
            config: HostConfig,
            fs: Optional[LocalFileSystem] = None,
            stdout: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self._stdout = stdout

        self.namespace: Dict[str, Any] = {"__name__": "__scripthost__"}
        self.loader = ScriptLoader(self.namespace, self._read_script)
        self.io = HostIO(config, self.loader.load, fs)
        self.log = HostLog(self.print, quiet=config.quiet, verbose=config.verbose)
        self.sys = SysInfo(slash=config.separator, pwd=config.pwd)

        self.namespace.update(self._build_globals())

    # -------------------------------------------------------------------------
    # SCRIPT PRIMITIVES
    # -------------------------------------------------------------------------

    def load(self, path: str) -> None:
        self.loader.load(path)

    def print(self, *values: object) -> None:
        print(*values, file=self._stdout if self._stdout is not None else sys.stdout)

    def quit(self, code: int = 0) -> None:
        raise HostExit(code)

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """
        Include the bootstrap scripts in order and call the entry function.

        Returns:
            int: 0 on completion, or the code passed to ``quit``.

        Raises:
            ScriptLoadError: A bootstrap script could not be loaded.
            ScriptHostError: The entry function is not defined.
        """
        try:
            for script in self.config.bootstrap_scripts:
                self.io.include(script)

            entry = self.namespace.get(self.config.entry_point)
            if not callable(entry):
                raise ScriptHostError(
                    f"Entry point '{self.config.entry_point}' is not defined by the bootstrap scripts"
                )

            logger.debug(f"Calling entry point: {self.config.entry_point}()")
            entry()
        except HostExit as e:
            logger.debug(f"Scripts requested exit with code {e.exit_code}")
            return e.exit_code

        return 0

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _read_script(self, path: str) -> str:
        return self.io.read_file(path)

    def _build_globals(self) -> Dict[str, Any]:
        env = dict(os.environ)
        env[TEMPLATE_DIR_ENV_VAR] = self.config.template_dir

        return {
            "arguments": list(self.config.arguments),
            "load": self.load,
            "print": self.print,
            "quit": self.quit,
            "LOG": self.log,
            "SYS": self.sys,
            "IO": self.io,
            "FilePath": FilePath,
            "FileWriter": FileWriter,
            "ENV": env,
        }
