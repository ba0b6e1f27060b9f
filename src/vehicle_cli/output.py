"""Rendering of command results for the terminal."""

from __future__ import annotations

import json
import sys
from typing import Any, Optional, Sequence, TextIO

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import Vehicle

NO_VEHICLES_MESSAGE = "No vehicles found."


def print_data(data: Any, output: str, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    if output == "yaml":
        yaml.safe_dump(data, out, sort_keys=False)
    else:
        json.dump(data, out, indent=2)
        out.write("\n")


def _vehicle_table(vehicles: Sequence[Vehicle]) -> Table:
    table = Table(
        title=Text("Vehicles", justify="center"),
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
    )
    table.add_column("ID", justify="right")
    table.add_column("Shortcode")
    table.add_column("Battery", justify="right")
    table.add_column("Lat", justify="right")
    table.add_column("Lon", justify="right")
    for vehicle in vehicles:
        table.add_row(
            str(vehicle.id),
            vehicle.shortcode,
            str(vehicle.battery),
            str(vehicle.position.latitude),
            str(vehicle.position.longitude),
        )
    return table


def print_vehicles(vehicles: Sequence[Vehicle], output: str = "text", stream: Optional[TextIO] = None) -> None:
    """Print vehicles in the requested format.

    ``text`` writes one summary line per vehicle, ``table`` draws a rich table,
    and ``json``/``yaml`` dump the vehicle records as-is.
    """
    out = stream if stream is not None else sys.stdout
    if output in ("json", "yaml"):
        print_data([vehicle.to_dict() for vehicle in vehicles], output, out)
        return
    if not vehicles:
        out.write(NO_VEHICLES_MESSAGE + "\n")
        return
    if output == "table":
        Console(file=out).print(_vehicle_table(vehicles))
        return
    for vehicle in vehicles:
        out.write(vehicle.summary_line() + "\n")
