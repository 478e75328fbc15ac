"""
Command line interface.

``subcrate new <path>`` creates a new package, ``subcrate check-name <name>``
reports whether a name is valid and how it is encoded.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .naming.namespace import check_name
from .scaffold import NewOptions, new_package
from .utils.config import get_config, load_config, set_config
from .utils.constants import CLI_FAILURE_EXIT_CODE, PackageKind
from .utils.exceptions import SubcrateError
from .utils.logging import setup_logging


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subcrate",
        description="Package name validation and scaffolding",
    )
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser(
        "new",
        help="Create a new package at <path>",
        epilog="Run `subcrate new --help` for more detailed information.",
    )
    new.add_argument(
        "path",
        help="Directory to create. Without --name, the trailing components of <path> "
             "that do not exist yet form the package name, joined with the namespace "
             "delimiter: `foo/bar` in an empty directory names the package `foo/bar`, "
             "while an existing `foo` names it `bar`",
    )
    new.add_argument("--name", help="Set the resulting package name, defaults to the name derived from <path>")
    kind = new.add_mutually_exclusive_group()
    kind.add_argument("--bin", dest="kind", action="store_const", const=PackageKind.BIN,
                      help="Use a binary (application) template")
    kind.add_argument("--lib", dest="kind", action="store_const", const=PackageKind.LIB,
                      help="Use a library template")
    new.add_argument("--registry", metavar="REGISTRY", help="Registry to use")
    new.add_argument("--strict", action="store_true", default=None,
                     help="Treat name warnings as errors")
    new.add_argument("-q", "--quiet", action="store_true", help="No output printed to stdout")

    check = subparsers.add_parser("check-name", help="Validate a package name and show its encodings")
    check.add_argument("name")
    check.add_argument("--max-depth", type=_non_negative_int, default=None,
                       help="Maximum number of namespace delimiters")

    return parser


def _run_new(args: argparse.Namespace) -> int:
    options = NewOptions(
        path=args.path,
        name=args.name,
        kind=args.kind,
        registry=args.registry,
        quiet=args.quiet,
        strict=args.strict,
    )
    outcome = new_package(options)
    if not outcome.ok:
        print(f"error: {outcome.error}", file=sys.stderr)
        return CLI_FAILURE_EXIT_CODE

    for advisory in outcome.advisories:
        print(f"warning: {advisory.message}", file=sys.stderr)
    if not options.quiet:
        print(outcome.status_message())
    return 0


def _run_check_name(args: argparse.Namespace) -> int:
    result = check_name(args.name, max_depth=args.max_depth)
    name = result.name
    print(f"name: {name.raw}")
    print(f"segments: {', '.join(name.segments)}")
    print(f"path encoding: {name.path_encoding}")
    print(f"identifier encoding: {name.identifier_encoding}")
    for advisory in result.advisories:
        print(f"warning: {advisory.message}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the subcrate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.config:
            set_config(load_config(args.config))
        config = get_config()
        log_file = config.logging.log_file if config.logging.enable_file_logging else None
        level = "DEBUG" if args.verbose else os.environ.get("SUBCRATE_LOG_LEVEL", config.logging.level)
        setup_logging(level, log_file)

        if args.command == "new":
            return _run_new(args)
        return _run_check_name(args)
    except SubcrateError as e:
        print(f"error: {e}", file=sys.stderr)
        return CLI_FAILURE_EXIT_CODE


def run() -> None:
    """Console script wrapper exiting with the command status."""
    sys.exit(main())


if __name__ == "__main__":
    run()
