from __future__ import annotations

"""
Unit tests for the script-facing LOG object.

Verifies quiet/verbose gating, warning bookkeeping, output stream routing
and exception location prefixes.
"""

import io
from pathlib import Path
from typing import List

import pytest

from scripthost.core.services.host_log import HostLog, exception_location


@pytest.fixture
def printed() -> List[str]:
    return []


def test_warn_prints_and_records(printed: List[str]) -> None:
    log = HostLog(printed.append)
    log.warn("missing symbol")

    assert printed == [">> WARNING: missing symbol"]
    assert log.warnings == [">> WARNING: missing symbol"]


def test_warn_quiet_drops_everything(printed: List[str]) -> None:
    log = HostLog(printed.append, quiet=True)
    log.warn("ignored")

    assert printed == []
    assert log.warnings == []


def test_warn_with_exception_prefixes_location(printed: List[str]) -> None:
    log = HostLog(printed.append)
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        log.warn("failed", e)

    message = log.warnings[0]
    assert message.startswith(">> WARNING: ")
    assert Path(__file__).name in message
    assert message.endswith(": failed")
    assert ", line " in message


def test_warn_with_syntax_error_uses_its_location(printed: List[str]) -> None:
    log = HostLog(printed.append)
    err = SyntaxError("bad token", ("script.py", 7, 1, "x = ("))
    log.warn("cannot parse", err)

    assert log.warnings == [">> WARNING: script.py, line 7: cannot parse"]


def test_warn_goes_to_out_stream(printed: List[str]) -> None:
    out = io.StringIO()
    log = HostLog(printed.append, out=out)
    log.warn("to stream")

    assert printed == []
    assert out.getvalue() == ">> WARNING: to stream\n"


def test_inform_silent_unless_verbose(printed: List[str]) -> None:
    HostLog(printed.append).inform("step")
    assert printed == []

    HostLog(printed.append, verbose=True).inform("step")
    assert printed == [" > step"]


def test_inform_always_written_to_out_stream(printed: List[str]) -> None:
    out = io.StringIO()
    HostLog(printed.append, out=out).inform("progress")
    assert out.getvalue() == " > progress\n"
    assert printed == []


def test_inform_quiet(printed: List[str]) -> None:
    out = io.StringIO()
    HostLog(printed.append, quiet=True, verbose=True, out=out).inform("hidden")
    assert printed == []
    assert out.getvalue() == ""


def test_exception_location_without_traceback() -> None:
    assert exception_location(ValueError("never raised")) == ("<unknown>", "?")
