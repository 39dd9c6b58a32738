from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of run flags to configuration overrides.
2. CSV parsing of the bootstrap list.
3. Defaults of the ls command.
"""

import pytest

from scripthost.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_run_flags_mapping():
    args = parse_args([
        "run",
        "--pwd", "/opt/app",
        "--encoding", "ascii",
        "--separator", "\\",
        "--suffix", ".jsx",
        "--depth", "3",
        "--entry", "start",
        "-q",
        "-v",
    ])

    overrides = args_to_overrides(args)

    assert overrides["pwd"] == "/opt/app"
    assert overrides["encoding"] == "ascii"
    assert overrides["separator"] == "\\"
    assert overrides["script_suffix"] == ".jsx"
    assert overrides["list_depth"] == 3
    assert overrides["entry_point"] == "start"
    assert overrides["quiet"] is True
    assert overrides["verbose"] is True


def test_bootstrap_csv_parsing():
    args = parse_args(["run", "--bootstrap", "frame.py, lib.py,,main.py"])
    assert args_to_overrides(args)["bootstrap_scripts"] == ["frame.py", "lib.py", "main.py"]


def test_script_arguments_are_collected():
    args = parse_args(["run", "--pwd", "/opt/app", "alpha", "beta"])
    assert args_to_overrides(args)["arguments"] == ["alpha", "beta"]


def test_run_defaults_are_unset():
    overrides = args_to_overrides(parse_args(["run"]))

    assert overrides["pwd"] is None
    assert overrides["bootstrap_scripts"] is None
    assert overrides["list_depth"] is None
    assert overrides["arguments"] == []
    assert "quiet" not in overrides
    assert "verbose" not in overrides


def test_global_flags_precede_command():
    args = parse_args(["--debug", "--log-file", "/tmp/host.log", "run"])
    assert args.debug is True
    assert args.log_file == "/tmp/host.log"
    assert args.command == "run"


def test_ls_defaults():
    args = parse_args(["ls", "/srv/scripts"])
    assert args.command == "ls"
    assert args.directory == "/srv/scripts"
    assert args.depth == 1
    assert args.separator == "/"
    assert args.json_output is False


def test_command_is_required():
    with pytest.raises(SystemExit):
        parse_args([])
