"""Public Pydantic models for Bitmovin API responses."""

from bitmovin_sdk.models.envelope import ErrorData, ErrorDetail, Link, ResponseEnvelope

__all__ = ["ResponseEnvelope", "ErrorData", "ErrorDetail", "Link"]
