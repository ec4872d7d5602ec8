# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the StrictVal command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from strictval.declarations.loader import load_structures
from strictval.errors import ConfigError, ValidationError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the StrictVal CLI."""
    parser = argparse.ArgumentParser(
        prog="strictval",
        description="StrictVal - immutable, strictly-typed value objects",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a data document against a declared structure",
        description=(
            "Load structure declarations from a YAML file and check that a JSON or YAML "
            "data document deserializes into a valid instance of the named structure."
        ),
    )
    check_parser.add_argument("schema", help="YAML file declaring the structures")
    check_parser.add_argument("structure", help="Name of the structure the data must conform to")
    check_parser.add_argument("data", help="Data document (.json is read as JSON, anything else as YAML)")
    check_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


class _DataFileError(Exception):
    """Raised when the data document cannot be read or parsed."""


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        structures = load_structures(Path(args.schema))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    record_type = structures.get(args.structure)
    if record_type is None:
        available = ", ".join(structures) or "none"
        print(
            f"Error: unknown structure '{args.structure}' (declared: {available}).",
            file=sys.stderr,
        )
        return 1

    try:
        plain = _read_data(Path(args.data))
    except _DataFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        record_type.deserialize(plain)
    except ValidationError as exc:
        print(f"Invalid {args.structure}: {exc}", file=sys.stderr)
        return 1

    print(f"OK: '{args.data}' is a valid {args.structure}.")
    return 0


def _read_data(path: Path) -> Any:
    """Read a JSON or YAML data document."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _DataFileError(f"Cannot read data file: {exc}") from exc

    if path.suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise _DataFileError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise _DataFileError(f"Invalid YAML in {path}: {exc}") from exc
