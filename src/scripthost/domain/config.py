from __future__ import annotations

"""
Host Configuration Domain.

Describes the immutable runtime context handed to the path model, the
directory lister and the script runtime. Replaces the process-wide SYS/IO
globals of the legacy host with one explicit object per run.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from scripthost.domain.constants import (
    DEFAULT_BOOTSTRAP_SCRIPTS,
    DEFAULT_ENCODING,
    DEFAULT_ENTRY_POINT,
    DEFAULT_LIST_DEPTH,
    DEFAULT_SCRIPT_SUFFIX,
    DEFAULT_SEPARATOR,
    DEFAULT_TEMPLATE_SUBDIR,
)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HostConfig:
    """
    Immutable runtime context of a script host.

    Attributes:
        pwd: Absolute base directory of the scripts, ending with the separator.
        separator: Separator used for path serialization and listing output.
        encoding: Initial text encoding of IO reads and writes.
        script_suffix: Suffix a file must carry to be loaded by include_dir.
        list_depth: Default recursion depth of IO.ls.
        bootstrap_scripts: Scripts included, in order, before the entry call.
        entry_point: Name of the function called once bootstrapping is done.
        arguments: Arguments exposed to scripts as ``arguments``.
        template_dir: Value published to scripts as ENV["JSDOCTEMPLATEDIR"].
        quiet: Suppress every LOG message.
        verbose: Print LOG.inform messages when no output stream is set.
    """
    pwd: str
    separator: str = DEFAULT_SEPARATOR
    encoding: str = DEFAULT_ENCODING
    script_suffix: str = DEFAULT_SCRIPT_SUFFIX
    list_depth: int = DEFAULT_LIST_DEPTH
    bootstrap_scripts: Tuple[str, ...] = DEFAULT_BOOTSTRAP_SCRIPTS
    entry_point: str = DEFAULT_ENTRY_POINT
    arguments: Tuple[str, ...] = ()
    template_dir: str = ""
    quiet: bool = False
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HostConfig":
        """
        Build a configuration from a validated dictionary.

        Normalizes ``pwd`` to an absolute directory ending with the separator
        and derives ``template_dir`` from it when none is given.
        """
        separator = data.get("separator") or DEFAULT_SEPARATOR
        pwd = _normalize_pwd(data.get("pwd") or os.getcwd(), separator)
        template_dir = data.get("template_dir") or default_template_dir(pwd)

        return cls(
            pwd=pwd,
            separator=separator,
            encoding=data.get("encoding", DEFAULT_ENCODING),
            script_suffix=data.get("script_suffix", DEFAULT_SCRIPT_SUFFIX),
            list_depth=int(data.get("list_depth", DEFAULT_LIST_DEPTH)),
            bootstrap_scripts=tuple(data.get("bootstrap_scripts", DEFAULT_BOOTSTRAP_SCRIPTS)),
            entry_point=data.get("entry_point", DEFAULT_ENTRY_POINT),
            arguments=tuple(data.get("arguments") or ()),
            template_dir=template_dir,
            quiet=bool(data.get("quiet", False)),
            verbose=bool(data.get("verbose", False)),
        )

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Locations
        "pwd": os.getcwd(),
        "template_dir": "",

        # Path conventions
        "separator": DEFAULT_SEPARATOR,
        "encoding": DEFAULT_ENCODING,

        # Script discovery
        "script_suffix": DEFAULT_SCRIPT_SUFFIX,
        "list_depth": DEFAULT_LIST_DEPTH,
        "bootstrap_scripts": list(DEFAULT_BOOTSTRAP_SCRIPTS),
        "entry_point": DEFAULT_ENTRY_POINT,
        "arguments": [],

        # Script-facing log
        "quiet": False,
        "verbose": False,
    }


def default_template_dir(pwd: str) -> str:
    """Resolve the template directory that sits next to the script directory."""
    return os.path.abspath(os.path.join(pwd, DEFAULT_TEMPLATE_SUBDIR)) + os.sep


def _normalize_pwd(pwd: str, separator: str) -> str:
    """Return ``pwd`` as an absolute path terminated by ``separator``."""
    absolute = os.path.abspath(os.path.expanduser(pwd))
    if not absolute.endswith(separator):
        absolute += separator
    return absolute
