"""CLI entry point for metamatch."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import MatchConfig
from . import commands


def add_target_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the target arguments shared by find and match."""
    parser.add_argument(
        "target",
        help="Python target 'package.module:attribute', or an entity name with --model",
    )
    parser.add_argument(
        "-m",
        "--model",
        help="YAML annotation graph to read the target from",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="metamatch",
        description="Discover declaration metadata and match it against queries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=False)

    find_parser = subparsers.add_parser("find", help="Show the metadata discovered for a target")
    add_target_arguments(find_parser)

    match_parser = subparsers.add_parser("match", help="Check a target against a metadata query")
    add_target_arguments(match_parser)
    match_parser.add_argument("query", help="Query such as 'Service[scope=singleton]' or '*'")

    return parser


def configure_logging(config: MatchConfig, verbose: bool = False) -> None:
    """Send log records at the configured level to stderr."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.log_level)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = MatchConfig.from_env_or_file(args.config)
        configure_logging(config, args.verbose)

        if args.command == "find":
            return commands.handle_find(args, config)
        if args.command == "match":
            return commands.handle_match(args, config)

        parser.print_help()
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def main() -> NoReturn:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
