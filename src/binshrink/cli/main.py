"""
Command-line interface for the binshrink post-build wrapper.

Every argument is the build command; the wrapper has no options of its own
so that the command is passed through exactly as given. Configuration comes
from the environment instead:

    BINSHRINK_CONFIG     path to a config.toml
    BINSHRINK_LOG_LEVEL  DEBUG, INFO, WARNING, ERROR or CRITICAL

Usage:
    binshrink cargo build --release --bin geph4-exit

The process exits with the build command's status, whatever happened while
post-processing the artifacts.
"""

import argparse
import logging
import sys
import tomllib
from typing import Optional, Sequence

from ..config import CONFIG_ENV_VAR, LOG_LEVEL_ENV_VAR, get_config
from ..orchestration import SignalHandler, TerminationRequested
from ..system import ScratchScriptError
from ..validation import ValidationError, handle_cli_error
from .orchestrator import BuildRunner

# --- Logging Setup ---
# stderr keeps the build command's stdout untouched.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Parser used for usage and help output."""
    parser = argparse.ArgumentParser(
        prog="binshrink",
        usage="%(prog)s <build-command> [args...]",
        description=(
            "Run a build command, then shrink its output binaries with upx, "
            "falling back to xz, gzip and finally strip."
        ),
        epilog=(
            "environment:\n"
            f"  {CONFIG_ENV_VAR}     path to a config.toml\n"
            f"  {LOG_LEVEL_ENV_VAR}  log level override"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "build_command",
        nargs=argparse.REMAINDER,
        help="the build command and its arguments, passed through unmodified",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the wrapper and return the exit status for the process.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        The build command's exit status; 2 for a missing command, 128 + N
        when terminated by signal N.

    Raises:
        SystemExit: On configuration errors or when the temporary script
            cannot be created.
    """
    build_command = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not build_command:
        parser.print_usage(sys.stderr)
        logger.error("A build command is required")
        return EXIT_USAGE
    if build_command in (["-h"], ["--help"]):
        parser.print_help()
        return 0

    try:
        app_config = get_config()
    except (FileNotFoundError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    logging.getLogger().setLevel(app_config.wrapper.log_level)
    if app_config.source is not None:
        logger.debug(f"Using configuration from {app_config.source}")

    runner = BuildRunner(app_config)
    try:
        with SignalHandler():
            summary = runner.run(build_command)
    except ScratchScriptError as e:
        handle_cli_error(
            error=e,
            context="temporary script creation",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )
    except TerminationRequested as e:
        logger.warning(f"Terminated by signal {e.signum}")
        return e.exit_status
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return EXIT_INTERRUPTED

    shrunk = sum(1 for report in summary.artifacts if report.winner)
    logger.info(
        f"Post-processed {len(summary.artifacts)} artifact(s), {shrunk} shrunk; "
        f"exiting with build status {summary.exit_status}"
    )
    return summary.exit_status


def main_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
