import json
import logging

from member_capacity.log import ROOT_LOGGER, JSONFormatter, configure_logging


def test_configure_logging_is_idempotent():
    first = configure_logging("DEBUG")
    second = configure_logging("INFO")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
    assert second.name == ROOT_LOGGER


def test_json_formatter():
    record = logging.LogRecord("member_capacity.engine", logging.DEBUG, __file__, 1, "engaged=%s", ("20",), None)
    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "member_capacity.engine"
    assert payload["message"] == "engaged=20"
