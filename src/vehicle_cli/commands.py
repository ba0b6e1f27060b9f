"""Subcommand handlers.

Handlers receive the client configuration and an open :class:`HttpClient`
and report their outcome as a :class:`CommandResult`. Exiting the process is
left to :func:`vehicle_cli.cli.main`.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from .config import ClientConfig
from .errors import display_error
from .http_client import HttpClient
from .logging import get_logger
from .models import Vehicle
from .output import print_vehicles

logger = get_logger("vehicle_cli.commands")


@dataclass(frozen=True)
class CommandResult:
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def success(cls) -> "CommandResult":
        return cls(0)

    @classmethod
    def failure(cls, code: int = 1) -> "CommandResult":
        return cls(code)


def list_vehicles(config: ClientConfig, client: HttpClient, args: argparse.Namespace) -> CommandResult:
    try:
        data = client.get("/vehicles")
        payload = (data.get("vehicles") if isinstance(data, dict) else None) or []
        vehicles = [Vehicle.from_dict(item) for item in payload]
        logger.info("Fetched vehicles", extra={"count": len(vehicles)})
        print_vehicles(vehicles, config.output)
    except Exception as exc:
        display_error(exc)
        return CommandResult.failure(1)
    return CommandResult.success()


def delete_vehicle(config: ClientConfig, client: HttpClient, args: argparse.Namespace) -> CommandResult:
    vehicle_id = args.id
    try:
        client.delete(f"/vehicles/{vehicle_id}")
    except Exception as exc:
        display_error(exc)
        return CommandResult.failure(1)
    logger.info("Deleted vehicle", extra={"vehicle_id": vehicle_id})
    sys.stdout.write(f"Vehicle {vehicle_id} deleted successfully\n")
    return CommandResult.success()
