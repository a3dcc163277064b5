#!/usr/bin/env python3
"""
Command-line entry point for flatconf.

Loads a key=value file and prints every entry, the entry count, or a single
typed value.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import settings
from .errors import ErrorKind
from .store import ConfigStore
from .utils.helpers import setup_logging

EXIT_LOAD_FAILED = 1
EXIT_KEY_MISSING = 2

VALUE_TYPES = ["string", "int", "bool", "string-array", "int-array"]


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="flatconf - inspect key=value configuration files"
    )

    parser.add_argument("file", help="Configuration file to load")

    # Query options
    parser.add_argument("-k", "--key", help="Print only the value of this key")
    parser.add_argument(
        "-t",
        "--type",
        default="string",
        choices=VALUE_TYPES,
        help="How to read the value of --key (default: string)",
    )
    parser.add_argument(
        "-d",
        "--default",
        default=None,
        help="Value printed when --key is missing",
    )
    parser.add_argument(
        "--sep",
        default=None,
        help="Separator for array types (default: from settings)",
    )
    parser.add_argument(
        "-c", "--count", action="store_true", help="Print the number of entries"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def _query(store: ConfigStore, args) -> int:
    """Print the typed value of ``args.key`` and return the exit code."""
    default = args.default
    if args.type == "string":
        result = store.get_as_string(args.key, default if default is not None else "")
    elif args.type == "int":
        result = store.get_as_int(args.key, int(default) if default is not None else 0)
    elif args.type == "bool":
        result = store.get_as_bool(args.key, default in ("true", "1"))
    elif args.type == "string-array":
        result = store.get_as_string_array(args.key, default or "", args.sep)
    else:
        result = store.get_as_int_array(args.key, default or "", args.sep)

    value = result.value
    if isinstance(value, list):
        for item in value:
            print(item)
    elif isinstance(value, bool):
        print("true" if value else "false")
    else:
        print(value)

    if result.error is not None and result.error.kind is ErrorKind.KEY_NOT_FOUND:
        logger.warning(f"Key '{args.key}' not found in {args.file}")
        return EXIT_KEY_MISSING
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    setup_logging(args.verbose or settings.get("logging.verbose", False))

    if args.type == "int" and args.default is not None:
        try:
            int(args.default)
        except ValueError:
            logger.error(f"--default must be an integer for type int, got {args.default!r}")
            return EXIT_LOAD_FAILED

    store, error = ConfigStore.create(args.file)
    if error is not None:
        logger.error(f"Failed to load {args.file}: {error}")
        return EXIT_LOAD_FAILED

    try:
        if args.key is not None:
            return _query(store, args)

        if args.count:
            print(store.length().value)
            return 0

        entries = store.snapshot().value
        for key in sorted(entries):
            print(f"{key}={entries[key]}")
        return 0
    finally:
        store.dispose()


if __name__ == "__main__":
    sys.exit(main())
