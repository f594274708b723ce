"""Public exceptions for the Bitmovin SDK."""


class BitmovinError(Exception):
    """Base exception for all Bitmovin SDK errors."""


class BitmovinAPIError(BitmovinError):
    """Error response from the Bitmovin API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        request_id: str | None = None,
        code: int | None = None,
        developer_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.request_id = request_id
        self.code = code
        self.developer_message = developer_message


class BitmovinConfigError(BitmovinError):
    """Configuration error (missing env vars, invalid values)."""
