"""Command-line client for the vehicle management HTTP API."""

__all__ = ["cli", "commands", "config", "errors", "http_client", "models", "output"]
__version__ = "1.0.0"
