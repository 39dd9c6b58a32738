from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging and
validation, script host execution and exit code mapping. Also exposes the
directory lister as a standalone ``ls`` command.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from scripthost.core.runtime import ScriptHost
from scripthost.core.services.lister import TreeLister
from scripthost.core.services.validator import validate_config
from scripthost.domain.config import HostConfig
from scripthost.domain.errors import FileSystemError, PathNotFoundError
from scripthost.infra.fs import LocalFileSystem
from scripthost.infra.logging import LoggingConfig, configure_logging, get_logger
from scripthost.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments, sys.argv[1:] when None.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    if args.command == "ls":
        return _run_ls(args.directory, args.depth, args.separator, args.json_output)
    return _run_host(cli_args.args_to_overrides(args), dump_config=args.dump_config)

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_host(overrides: Dict[str, Any], *, dump_config: bool = False) -> int:
    """Validate the configuration and run the bootstrap scripts."""
    clean_conf, warnings = validate_config(_drop_unset(overrides), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    config = HostConfig.from_dict(clean_conf)

    if dump_config:
        print(json.dumps(_config_as_dict(config), ensure_ascii=False, indent=2))
        return EXIT_OK

    if not os.path.isdir(config.pwd):
        msg = f"Script directory does not exist: {config.pwd}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logger.debug(f"Hosting scripts from: {config.pwd}")
    try:
        return ScriptHost(config).run()
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Script execution failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE


def _run_ls(directory: str, depth: int, separator: str, json_output: bool) -> int:
    """Print the files under ``directory``."""
    lister = TreeLister(LocalFileSystem(), separator=separator)
    try:
        files = lister.list_files(directory, depth)
    except PathNotFoundError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except FileSystemError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if json_output:
        print(json.dumps(files, ensure_ascii=False, indent=2))
    else:
        for path in files:
            print(path)
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _drop_unset(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the overrides the user actually supplied."""
    return {k: v for k, v in overrides.items() if v is not None}


def _config_as_dict(config: HostConfig) -> Dict[str, Any]:
    return asdict(config)
