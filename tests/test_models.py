"""Tests for response envelope models."""

import pytest
from pydantic import ValidationError

from bitmovin_sdk.models import ErrorData, ResponseEnvelope


class TestResponseEnvelope:
    """Tests for ResponseEnvelope."""

    def test_parses_camel_case_fields(self):
        """Should map the API's camelCase names."""
        envelope = ResponseEnvelope.model_validate(
            {
                "requestId": "req-1",
                "status": "ERROR",
                "data": {
                    "code": 2000,
                    "message": "Invalid input",
                    "developerMessage": "name is required",
                    "details": [{"type": "ERROR", "text": "missing", "field": "name"}],
                },
            }
        )
        assert envelope.request_id == "req-1"
        assert envelope.data.code == 2000
        assert envelope.data.developer_message == "name is required"
        assert envelope.data.details[0].field == "name"
        assert envelope.data.links == []

    def test_ignores_unknown_fields(self):
        """Should tolerate fields added by newer API versions."""
        envelope = ResponseEnvelope.model_validate(
            {"requestId": "req-1", "status": "SUCCESS", "data": {"result": {}}, "extra": 1}
        )
        assert envelope.status == "SUCCESS"
        assert envelope.data.code == 0

    def test_requires_request_id_and_status(self):
        """Should reject bodies that are not envelopes."""
        with pytest.raises(ValidationError):
            ResponseEnvelope.model_validate({"message": "oops"})

    def test_format_error(self):
        """Should render status, code, request id and message."""
        envelope = ResponseEnvelope(
            request_id="req-9",
            status="ERROR",
            data=ErrorData(code=1001, message="Not found"),
        )
        assert envelope.format_error() == "ERROR 1001 (ReqId#req-9): Not found"

    def test_null_code_is_zero(self):
        """Should read a null error code as 0."""
        envelope = ResponseEnvelope.model_validate(
            {"requestId": "r", "status": "ERROR", "data": {"code": None, "message": "boom"}}
        )
        assert envelope.data.code == 0
        assert envelope.format_error() == "ERROR 0 (ReqId#r): boom"
