import json
import logging
import sys

from buku_api.context import request_id_var
from buku_api.logging_config import JsonFormatter, configure_logging


def make_record(msg: str = "hello", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="buku_api.main",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_emits_expected_fields() -> None:
    formatter = JsonFormatter(service_name="buku-api")

    payload = json.loads(formatter.format(make_record()))

    assert payload["service"] == "buku-api"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "buku_api.main"
    assert payload["message"] == "hello"
    assert "timestamp" in payload
    assert "request_id" not in payload


def test_json_formatter_emits_request_id() -> None:
    formatter = JsonFormatter(service_name="buku-api")

    token = request_id_var.set("req-456")
    try:
        payload = json.loads(formatter.format(make_record()))
    finally:
        request_id_var.reset(token)

    assert payload["request_id"] == "req-456"


def test_json_formatter_includes_extra_fields() -> None:
    formatter = JsonFormatter(service_name="buku-api")
    record = make_record("http_request_complete")
    record.status_code = 200
    record.path = "/bukus"

    payload = json.loads(formatter.format(record))

    assert payload["status_code"] == 200
    assert payload["path"] == "/bukus"
    assert "lineno" not in payload


def test_json_formatter_includes_exception() -> None:
    formatter = JsonFormatter(service_name="buku-api")
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = make_record("failed", exc_info=sys.exc_info())

    payload = json.loads(formatter.format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_configure_logging_plain_text_format() -> None:
    configure_logging(level="DEBUG", output_format="plain", service_name="buku-api")

    root_logger = logging.getLogger()

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0].formatter, JsonFormatter)


def test_configure_logging_json_format() -> None:
    configure_logging(level="info", output_format="JSON", service_name="buku-api")

    root_logger = logging.getLogger()

    assert root_logger.level == logging.INFO
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
