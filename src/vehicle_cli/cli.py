"""Command-line entry point for the vehicle management API."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Optional

from . import __version__
from .commands import CommandResult, delete_vehicle, list_vehicles
from .config import DEFAULT_SERVER_URL, OUTPUT_FORMATS, ClientConfig, CliError, load_config
from .http_client import HttpClient
from .logging import LOG_FORMATS, LOG_LEVELS, configure_logging, get_logger

PROG = "vehicle-cli"

Handler = Callable[[ClientConfig, HttpClient, argparse.Namespace], CommandResult]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="CLI tool to manage vehicles via HTTP API",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-a",
        "--address",
        metavar="URL",
        default=DEFAULT_SERVER_URL,
        help=f"Server address (default: {DEFAULT_SERVER_URL})",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format for vehicle listings (default: text)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Diagnostic log level; logs go to stderr (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Diagnostic log format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)
    _add_vehicle_commands(subparsers)
    return parser


def _add_vehicle_commands(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    list_cmd = subparsers.add_parser(
        "list-vehicle",
        help="List vehicles (GET /vehicles)",
        description="List vehicles",
    )
    list_cmd.set_defaults(func=list_vehicles)

    delete = subparsers.add_parser(
        "delete-vehicle",
        help="Delete a vehicle by ID (DELETE /vehicles/{id})",
        description="Delete a vehicle by ID",
    )
    delete.add_argument("-i", "--id", required=True, help="Vehicle ID")
    delete.set_defaults(func=delete_vehicle)


def initialize_client(config: ClientConfig) -> HttpClient:
    return HttpClient(config.base_url, headers=config.headers, timeout=config.timeout)


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(args=argv)
    configure_logging(args.log_level, args.log_format)

    if not args.command:
        parser.print_help()
        return

    try:
        config = load_config(args)
    except CliError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.exit(1)

    get_logger("vehicle_cli").debug(
        "Dispatching command",
        extra={"command": args.command, "base_url": config.base_url},
    )
    with initialize_client(config) as client:
        func: Handler = args.func
        result = func(config, client, args)

    if not result.ok:
        sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
