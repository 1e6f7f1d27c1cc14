import io
import json
import logging
from datetime import datetime, timezone

from agora_access_key.config import AccessKeyConfig
from agora_access_key.logging import setup_structured_logging
from agora_access_key.token import AccessKeyIssuer

APP_ID = "970CA35de60c44645bbae8a215061b33"
APP_CERTIFICATE = "5CFd2fd1755d40ecb72977518be15d3b"


def _detach(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_issued_token_is_logged_as_json_record() -> None:
    stream = io.StringIO()
    logger = setup_structured_logging(logging.DEBUG, stream=stream)
    try:
        issuer = AccessKeyIssuer(
            AccessKeyConfig(app_id=APP_ID, app_certificate=APP_CERTIFICATE),
            clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc),
            salt_source=lambda: 3,
        )
        issued = issuer.issue("lobby", "alice", ["join_channel"])
    finally:
        _detach(logger)

    lines = [line for line in stream.getvalue().splitlines() if line]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["level"] == "DEBUG"
    assert record["component"] == "agora_access_key.token.issuer"
    assert "channel=lobby" in record["message"]
    assert APP_CERTIFICATE not in lines[0]
    assert issued.token not in lines[0]


def test_repeated_setup_does_not_duplicate_output() -> None:
    stream = io.StringIO()
    setup_structured_logging(logging.INFO, stream=stream)
    logger = setup_structured_logging(logging.INFO, stream=stream)
    try:
        assert len(logger.handlers) == 1
        logging.getLogger("agora_access_key.token.issuer").info("hello")
        logging.getLogger("agora_access_key.token.issuer").debug("hidden")
    finally:
        _detach(logger)

    output = stream.getvalue()
    assert output.count("hello") == 1
    assert "hidden" not in output
