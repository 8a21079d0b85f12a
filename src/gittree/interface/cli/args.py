from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into the typed BuildConfig consumed by the build service.
"""

import argparse
import sys
from typing import Optional, TextIO

from gittree import __version__
from gittree.domain.config import BuildConfig
from gittree.domain.constants import STDIN_MARKER

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the gittree CLI.

    '--json' is optional at the argparse level so that a missing payload is
    reported through MissingArgumentError rather than argparse's own exit.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="gittree",
        description="Convert a flat git tree listing into a nested file tree (JSON on stdout).",
    )

    p.add_argument(
        "--json",
        dest="json",
        nargs="?",
        const=None,
        default=None,
        metavar="PAYLOAD",
        help=f"JSON object with a 'tree' array of {{path, type}} entries. "
             f"Use '{STDIN_MARKER}' to read it from standard input.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace, stdin: Optional[TextIO] = None) -> BuildConfig:
    """
    Translate the argparse Namespace into a BuildConfig.

    Args:
        args: Parsed command-line arguments.
        stdin: Stream read when the payload is '-'. Defaults to sys.stdin.

    Returns:
        BuildConfig: The build input.
    """
    payload = args.json
    if payload == STDIN_MARKER:
        payload = (stdin or sys.stdin).read()
    return BuildConfig(json=payload)
