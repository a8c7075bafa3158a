"""Command line interface for generating and checking identifiers."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import msgspec

from .codec import generate as generate_uid
from .codec import resolve_timezone, validate
from .config import CodecConfig, load_config
from .exceptions import ConfigurationError, MicroUIDError
from .metadata import PROJECT_NAME, __version__
from .serialization import json_line


def main(argv: Sequence[str] | None = None) -> int:
    try:
        config = load_config()
    except msgspec.ValidationError as exc:
        return _fail(ConfigurationError(f"Invalid MICROUID_* environment: {exc}"))
    parser = _build_parser(config)
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except MicroUIDError as exc:
        return _fail(exc)


def _fail(error: MicroUIDError) -> int:
    print(error.to_json().decode(), file=sys.stderr)
    return 2


def _build_parser(config: CodecConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROJECT_NAME, description="Generate and validate short timestamped UIDs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log why identifiers are rejected")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Print new identifiers")
    generate.add_argument("--length", type=int, default=config.length, help="Symbols per identifier")
    generate.add_argument(
        "--no-separator",
        dest="with_separator",
        action="store_false",
        default=config.with_separator,
        help="Print identifiers without group separators",
    )
    generate.add_argument("--count", type=int, default=1, help="Number of identifiers to print")
    generate.set_defaults(func=_cmd_generate)

    check = sub.add_parser("validate", help="Check identifiers and print their creation time")
    check.add_argument("uids", nargs="+", metavar="UID")
    check.add_argument("--timezone", default=config.display_timezone, help="IANA zone for reported timestamps")
    check.set_defaults(func=_cmd_validate)
    return parser


def _cmd_generate(args: argparse.Namespace) -> int:
    uids = [generate_uid(args.length, args.with_separator) for _ in range(args.count)]
    for uid in uids:
        print(uid)
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    zone = resolve_timezone(args.timezone)
    status = 0
    for uid in args.uids:
        created = validate(uid, timezone=zone)
        if created is None:
            status = 1
        print(json_line({"uid": uid, "valid": created is not None, "timestamp": created}))
    return status
