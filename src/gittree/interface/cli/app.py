from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, the
build itself and result rendering. stdout carries only the JSON forest;
every diagnostic goes to stderr.
"""

import argparse
import sys
from typing import List, Optional

from gittree.core.service import run
from gittree.domain.constants import EXIT_INTERRUPTED, EXIT_OK, EXIT_UNEXPECTED
from gittree.domain.errors import TreeBuildError
from gittree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from gittree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args, ignored = parser.parse_known_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    if ignored:
        logger.debug(f"Ignoring unrecognized arguments: {ignored}")

    try:
        return _execute(args)
    finally:
        shutdown_logging()


def _execute(args: argparse.Namespace) -> int:
    """Run the build and render its outcome."""
    try:
        config = cli_args.args_to_config(args)
        output = run(config)
        print(output)
    except TreeBuildError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_UNEXPECTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
