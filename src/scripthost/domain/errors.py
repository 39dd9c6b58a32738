from __future__ import annotations

"""
Host Error Taxonomy.

Defines the exceptions raised by the filesystem boundary, the IO facade and
the script runtime. Path manipulation has no entries here: it never fails.
"""

from typing import Optional


class ScriptHostError(Exception):
    """Base class for every error raised by the script host."""


# -----------------------------------------------------------------------------
# FILESYSTEM ERRORS
# -----------------------------------------------------------------------------

class FileSystemError(ScriptHostError, OSError):
    """
    Failure reported by the filesystem backend.

    Attributes:
        path: The path the failing operation was applied to.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class PathNotFoundError(FileSystemError):
    """The requested path does not exist."""


class ReadFailureError(FileSystemError):
    """A path exists but could not be inspected or listed."""


# -----------------------------------------------------------------------------
# RUNTIME ERRORS
# -----------------------------------------------------------------------------

class UnsupportedEncodingError(ScriptHostError, ValueError):
    """Raised when scripts request an encoding other than UTF-8 or ASCII."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported encoding: {encoding} - perhaps you can use UTF-8?")
        self.encoding = encoding


class ScriptLoadError(ScriptHostError):
    """A script file could not be read or compiled."""

    def __init__(self, message: str, script_path: str) -> None:
        super().__init__(message)
        self.script_path = script_path


class HostExit(SystemExit):
    """
    Raised by the script-facing ``quit`` primitive.

    Derives from SystemExit, so ``except Exception`` blocks inside legacy
    scripts do not catch it.
    """

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.exit_code = int(code or 0)
