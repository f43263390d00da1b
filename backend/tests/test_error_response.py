import logging
import pytest
from fastapi import HTTPException

from app.utils.errors import error_response, request_field_errors


def test_error_response_logs(caplog):
    caplog.set_level(logging.ERROR, logger="app.utils.errors")
    with pytest.raises(HTTPException) as exc:
        raise error_response("Invalid", {"field": "bad"}, 400)
    assert exc.value.status_code == 400
    assert exc.value.detail == {"message": "Invalid", "field_errors": {"field": "bad"}}
    assert any(
        "Invalid" in r.getMessage() and "'field': 'bad'" in r.getMessage()
        for r in caplog.records
    )


def test_request_field_errors_flattens_locations():
    errors = [
        {"loc": ("body", "services", "fence_sides"), "type": "int_type"},
        {"loc": ("body", "services", "fence_sides"), "type": "missing"},
        {"loc": ("body",), "type": "model_attributes_type"},
    ]
    assert request_field_errors(errors) == {
        "services.fence_sides": "int_type",
        "body": "model_attributes_type",
    }
