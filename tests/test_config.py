from argparse import Namespace

import pytest

from vehicle_cli.config import DEFAULT_TIMEOUT, CliError, ClientConfig, load_config, validate_url


@pytest.mark.parametrize(
    "url",
    [
        "http://localhost:3000",
        "https://api.example.com",
        "http://localhost:8080",
        "http://localhost:3000/api/vehicles",
        "http://127.0.0.1",
    ],
)
def test_validate_url_accepts_absolute_urls(url: str) -> None:
    assert validate_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not-a-url",
        "/vehicles",
        "localhost",
        "http://exa mple.com",
        " http://localhost:3000",
        "http://localhost:99999",
    ],
)
def test_validate_url_rejects_invalid(url: str) -> None:
    assert validate_url(url) is False


def test_client_config_defaults() -> None:
    config = ClientConfig(base_url="http://localhost:3000")
    assert config.timeout == DEFAULT_TIMEOUT == 10.0
    assert config.headers == {"Content-Type": "application/json"}
    assert config.output == "text"


def test_load_config_builds_client_config() -> None:
    config = load_config(Namespace(address="http://example.com", output="yaml"))
    assert config.base_url == "http://example.com"
    assert config.output == "yaml"


def test_load_config_rejects_invalid_address() -> None:
    with pytest.raises(CliError, match="Invalid URL: invalid-url"):
        load_config(Namespace(address="invalid-url", output="text"))
