import json
import logging

from vehicle_cli.logging import JsonFormatter, configure_logging, get_logger


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("vehicle_cli.http", logging.DEBUG, __file__, 1, "HTTP request completed", None, None)
    record.status = 204
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "vehicle_cli.http"
    assert payload["message"] == "HTTP request completed"
    assert payload["status"] == 204


def test_logs_go_to_stderr(capsys) -> None:
    configure_logging("INFO", "text")
    get_logger("vehicle_cli.commands").info("Fetched vehicles")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "INFO | vehicle_cli.commands | Fetched vehicles" in captured.err
