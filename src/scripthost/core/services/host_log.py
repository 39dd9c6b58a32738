from __future__ import annotations

"""
Script-Facing Message Log.

Implements the LOG object the legacy scripts report through. Messages go to
an optional output stream or to the host print primitive, warnings are kept
for later inspection and every message is mirrored to the stdlib logger at
DEBUG level.
"""

import logging
import traceback
from typing import Callable, List, Optional, TextIO, Tuple

logger = logging.getLogger(__name__)

WARNING_PREFIX = ">> WARNING: "
INFORM_PREFIX = " > "


class HostLog:
    """
    Collector of script warnings and progress messages.

    Attributes:
        warnings: Every warning emitted while not quiet, prefix included.
        verbose: Print inform messages when no output stream is set.
        quiet: Drop every message.
        out: Optional stream receiving all messages instead of print.
    """

    def __init__(
            self,
            print_fn: Callable[[str], None],
            *,
            quiet: bool = False,
            verbose: bool = False,
            out: Optional[TextIO] = None,
    ) -> None:
        self._print = print_fn
        self.quiet = quiet
        self.verbose = verbose
        self.out = out
        self.warnings: List[str] = []

    def warn(self, msg: str, exc: Optional[BaseException] = None) -> None:
        """Record a warning, located at the origin of ``exc`` when given."""
        if self.quiet:
            return
        if exc is not None:
            file_name, line_number = exception_location(exc)
            msg = f"{file_name}, line {line_number}: {msg}"

        msg = WARNING_PREFIX + msg
        self.warnings.append(msg)
        logger.debug(msg)
        if self.out is not None:
            self.out.write(msg + "\n")
        else:
            self._print(msg)

    def inform(self, msg: str) -> None:
        if self.quiet:
            return
        msg = INFORM_PREFIX + msg
        logger.debug(msg)
        if self.out is not None:
            self.out.write(msg + "\n")
        elif self.verbose:
            self._print(msg)


def exception_location(exc: BaseException) -> Tuple[str, str]:
    """
    Return the file name and line number an exception originated from.

    Syntax errors carry their own location; other exceptions are located by
    the innermost frame of their traceback.
    """
    if isinstance(exc, SyntaxError):
        return str(exc.filename), str(exc.lineno)

    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    if frames:
        return frames[-1].filename, str(frames[-1].lineno)
    return "<unknown>", "?"
