"""
Command line interface for webhookgen.

Usage:
    webhookgen                       # fetch from GitHub, print to stdout
    webhookgen all_webhooks.py       # fetch from GitHub, write file
    webhookgen events.md -           # read local markdown, print to stdout
    webhookgen events.md all_webhooks.py
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from webhookgen._version import __version__
from webhookgen.config import DEFAULT_SOURCE_URL, GenerateConfig
from webhookgen.exceptions import ConfigurationError, WebhookGenError
from webhookgen.generate import generate_file

USAGE = "usage: webhookgen [-v] [[srcfile] dstfile]"
LOG_LEVEL_ENV = "WEBHOOKGEN_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webhookgen",
        usage="%(prog)s [options] [[srcfile] dstfile]",
        description=(
            "Generate a Python table of GitHub Actions webhook events and their "
            "activity types from the 'Events that trigger workflows' document."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"webhookgen {__version__}")
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="[[srcfile] dstfile]; '-' or no dstfile writes to stdout, no srcfile fetches --url",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_SOURCE_URL,
        help="Document fetched when no srcfile is given (default: GitHub docs)",
    )
    parser.add_argument(
        "--variable",
        default="ALL_WEBHOOK_TYPES",
        help="Name of the generated constant (default: ALL_WEBHOOK_TYPES)",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="HTTP timeout in seconds"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log extraction details to stderr"
    )
    return parser


def resolve_log_level(verbose: bool = False, env_value: str | None = None) -> int:
    """Log level from -v or the environment variable; -v wins.

    Raises:
        ConfigurationError: If the environment names an unknown level.
    """
    if verbose:
        return logging.DEBUG
    if not env_value:
        return logging.WARNING

    value = env_value.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise ConfigurationError(
            f"{LOG_LEVEL_ENV} must be a logging level name, got {env_value!r}"
        )
    return level


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr at the level from resolve_log_level()."""
    level = resolve_log_level(verbose, os.getenv(LOG_LEVEL_ENV))
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) > 2:
        print(USAGE, file=sys.stderr)
        return 1

    src = args.paths[0] if len(args.paths) == 2 else None
    dst = args.paths[-1] if args.paths else None

    try:
        configure_logging(args.verbose)
        config = GenerateConfig(
            source_url=args.url, variable_name=args.variable, timeout=args.timeout
        )
        generate_file(src, dst, config)
    except WebhookGenError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
