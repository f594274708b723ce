"""Pydantic models for the Bitmovin response envelope.

Every API response is wrapped as ``{"requestId", "status", "data"}``. Only the
error shape of ``data`` is modelled here; resource payloads are left to callers.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Error Payload
# =============================================================================


class Link(BaseModel):
    """Documentation link attached to an error."""

    href: str | None = None
    title: str | None = None


class ErrorDetail(BaseModel):
    """Single detail entry of an error, usually tied to a request field."""

    type: str | None = None
    text: str | None = None
    field: str | None = None


class ErrorData(BaseModel):
    """The ``data`` member of an error response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: int = 0
    message: str = ""
    developer_message: str | None = Field(default=None, alias="developerMessage")
    links: list[Link] = Field(default_factory=list)
    details: list[ErrorDetail] = Field(default_factory=list)

    @field_validator("code", mode="before")
    @classmethod
    def null_code_is_zero(cls, v: int | None) -> int:
        return 0 if v is None else v


# =============================================================================
# Envelope
# =============================================================================


class ResponseEnvelope(BaseModel):
    """Envelope wrapping every Bitmovin API response.

    Fields:
        request_id: Server-side request identifier, quoted in support requests
        status: "SUCCESS" or "ERROR"
        data: Error payload (empty for success responses)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    request_id: str = Field(alias="requestId")
    status: str
    data: ErrorData = Field(default_factory=ErrorData)

    def format_error(self) -> str:
        """Render the envelope as ``<status> <code> (ReqId#<id>): <message>``."""
        return f"{self.status} {self.data.code} (ReqId#{self.request_id}): {self.data.message}"
