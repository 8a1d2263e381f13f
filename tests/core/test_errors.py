"""Error envelopes and the JSON log formatter."""

import json
import logging

from app.core.errors import (
    ApiError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)
from app.core.observability import ContextTextFormatter, JSONFormatter, setup_logging


def test_not_found_message_names_the_resource():
    err = NotFoundError("Spot")

    assert err.status_code == 404
    assert err.to_response() == {"message": "Spot couldn't be found", "statusCode": 404}


def test_validation_failed_carries_field_errors():
    err = ValidationFailedError({"name": "Name must be less than 50 characters"})

    assert err.to_response() == {
        "message": "Validation error",
        "statusCode": 400,
        "errors": {"name": "Name must be less than 50 characters"},
    }


def test_status_codes():
    assert ForbiddenError("nope").status_code == 403
    assert UnauthorizedError().status_code == 401
    assert UnauthorizedError().message == "Authentication required"
    assert ApiError("teapot", status_code=418).to_response()["statusCode"] == 418


def test_json_formatter_includes_extras():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "Spot created", None, None)
    record.spot_id = 7
    record.user_id = 3

    log = json.loads(JSONFormatter().format(record))

    assert log["message"] == "Spot created"
    assert log["level"] == "INFO"
    assert log["spot_id"] == 7
    assert log["user_id"] == 3
    assert "review_id" not in log


def test_text_formatter_appends_context_pairs():
    record = logging.LogRecord("app.test", logging.WARNING, __file__, 1, "Spot couldn't be found", None, None)
    record.path = "/spots/9"
    record.status_code = 404

    line = ContextTextFormatter().format(record)

    assert line.endswith("Spot couldn't be found [path=/spots/9 status_code=404]")


def test_setup_logging_installs_one_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug", "json")
        setup_logging("warning", "text")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ContextTextFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
