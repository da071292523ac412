"""Main CLI entry point for telegramtl."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config import DEFAULT_PASSWORD_SIZE, DEFAULT_SERVICE_PREFIX, DEFAULT_TYPE_PREFIX
from ..exceptions import TelegramTLError
from ..facade import Telegram
from ..schema import TypeLanguage
from ..transport import MockTransport
from .report import inspect_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the telegramtl CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="telegramtl: Telegram Type Language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  telegramtl --inspect schema.json       Show namespaces of a schema
  telegramtl --password                  Print a random password
  telegramtl --version                   Show version

The Telegram API schema can be downloaded from https://core.telegram.org/schema
        """,
    )

    parser.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Import a JSON schema and show its namespaces",
    )

    parser.add_argument(
        "--type-prefix",
        default=DEFAULT_TYPE_PREFIX,
        help=f"Prefix for schema types (default: {DEFAULT_TYPE_PREFIX})",
    )

    parser.add_argument(
        "--service-prefix",
        default=DEFAULT_SERVICE_PREFIX,
        help=f"Prefix for schema methods (default: {DEFAULT_SERVICE_PREFIX})",
    )

    parser.add_argument(
        "--password",
        metavar="SIZE",
        type=int,
        nargs="?",
        const=DEFAULT_PASSWORD_SIZE,
        help=f"Print a random password from SIZE random bytes (default: {DEFAULT_PASSWORD_SIZE})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="telegramtl 0.1.0",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    # Handle --inspect
    if args.inspect:
        file_path = Path(args.inspect)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            inspect_file(file_path, args.type_prefix, args.service_prefix)
            return 0
        except TelegramTLError as e:
            print(f"Error inspecting schema: {e}", file=sys.stderr)
            return 1

    # Handle --password
    if args.password is not None:
        tg = Telegram(MockTransport(), TypeLanguage())
        try:
            print(tg.create_random_password(args.password))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
