from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the script host launcher and translates
parsed namespaces into configuration overrides for the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from scripthost.domain.constants import DEFAULT_LIST_DEPTH, DEFAULT_SEPARATOR

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the scripthost CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="scripthost",
        description="Run legacy host scripts with load/print/quit/IO primitives.",
    )

    # --- Diagnostics (shared) ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostic logs to this rotating file.",
    )

    sub = p.add_subparsers(dest="command", required=True)

    # --- run ---
    run = sub.add_parser("run", help="Include the bootstrap scripts and call the entry function.")
    run.add_argument(
        "--pwd",
        dest="pwd",
        default=None,
        help="Base directory the scripts are loaded from (default: current directory).",
    )
    run.add_argument(
        "--encoding",
        dest="encoding",
        default=None,
        help="Initial IO encoding (utf8 or ascii).",
    )
    run.add_argument(
        "--separator",
        dest="separator",
        default=None,
        help="Path separator used by SYS.slash, FilePath and IO.ls.",
    )
    run.add_argument(
        "--suffix",
        dest="script_suffix",
        default=None,
        help="File suffix loaded by IO.include_dir (default: .py).",
    )
    run.add_argument(
        "--depth",
        dest="list_depth",
        type=int,
        default=None,
        help="Default recursion depth of IO.ls.",
    )
    run.add_argument(
        "--bootstrap",
        dest="bootstrap_scripts",
        default=None,
        help="Comma-separated scripts included before the entry call.",
    )
    run.add_argument(
        "--entry",
        dest="entry_point",
        default=None,
        help="Function called after bootstrapping (default: main).",
    )
    run.add_argument(
        "--template-dir",
        dest="template_dir",
        default=None,
        help="Value of ENV['JSDOCTEMPLATEDIR'] seen by scripts.",
    )
    run.add_argument("-q", "--quiet", action="store_true", help="Silence LOG output.")
    run.add_argument("-v", "--verbose", action="store_true", help="Print LOG.inform messages.")
    run.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    run.add_argument(
        "arguments",
        nargs="*",
        help="Arguments handed to the scripts (use -- before dashed values).",
    )

    # --- ls ---
    ls = sub.add_parser("ls", help="List the non-hidden files under a directory.")
    ls.add_argument("directory", help="File or directory to list.")
    ls.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_LIST_DEPTH,
        help="Directory levels to descend into (default: 1).",
    )
    ls.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Separator used to join listed paths.",
    )
    ls.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the listing as a JSON array.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate a parsed ``run`` namespace into configuration overrides.

    Options left unset map to None so that the merge keeps the defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {
        "pwd": args.pwd,
        "encoding": args.encoding,
        "separator": args.separator,
        "script_suffix": args.script_suffix,
        "list_depth": args.list_depth,
        "bootstrap_scripts": _split_csv(args.bootstrap_scripts),
        "entry_point": args.entry_point,
        "template_dir": args.template_dir,
        "arguments": list(args.arguments),
    }

    if args.quiet:
        overrides["quiet"] = True
    if args.verbose:
        overrides["verbose"] = True

    return overrides


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated option value, keeping None as None."""
    if value is None:
        return None
    return [x.strip() for x in value.split(",") if x.strip()]
