"""Client configuration and base address validation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Mapping

import httpx


DEFAULT_SERVER_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 10.0
DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}
OUTPUT_FORMATS = ("text", "json", "yaml", "table")


class CliError(Exception):
    """Raised when the CLI encounters an expected error condition."""


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the API client."""

    base_url: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: float = DEFAULT_TIMEOUT
    output: str = "text"


def validate_url(candidate: str) -> bool:
    """Return True when ``candidate`` parses as an absolute URL."""

    if not candidate or any(ch.isspace() for ch in candidate):
        return False
    try:
        url = httpx.URL(candidate)
    except (httpx.InvalidURL, TypeError, ValueError):
        return False
    if not url.is_absolute_url:
        return False
    port = url.port
    if port is not None and not 0 <= port <= 65535:
        return False
    return True


def load_config(args: argparse.Namespace) -> ClientConfig:
    address = args.address
    if not validate_url(address):
        raise CliError(f"Invalid URL: {address}")

    output = getattr(args, "output", None) or "text"
    if output not in OUTPUT_FORMATS:
        raise CliError(f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}")

    return ClientConfig(base_url=address, output=output)
