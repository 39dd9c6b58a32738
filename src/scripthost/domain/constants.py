from __future__ import annotations

"""
Domain Constants.

Central defaults shared by the path model, the directory lister and the
script runtime.
"""

from typing import Dict, Tuple

DEFAULT_SEPARATOR = "/"
DEFAULT_ENCODING = "utf8"
DEFAULT_LIST_DEPTH = 1

DEFAULT_SCRIPT_SUFFIX = ".py"
DEFAULT_BOOTSTRAP_SCRIPTS: Tuple[str, ...] = ("frame.py", "main.py")
DEFAULT_ENTRY_POINT = "main"

# Relative to the script base directory
DEFAULT_TEMPLATE_SUBDIR = "../templates/jsdoc/"
TEMPLATE_DIR_ENV_VAR = "JSDOCTEMPLATEDIR"

# Encoding aliases accepted by IO.set_encoding, matched case-insensitively
SUPPORTED_ENCODINGS: Dict[str, str] = {
    "UTF-8": "utf8",
    "ASCII": "ascii",
}

# FileWriter streams are always opened with this codec
WRITER_ENCODING = "utf8"
