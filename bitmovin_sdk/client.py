"""Client handle for the Bitmovin API.

Example:
    from bitmovin_sdk import new_bitmovin_default
    from bitmovin_sdk.rest import RestService

    with new_bitmovin_default("your-api-key") as bitmovin:
        rest = RestService(bitmovin)
        body = rest.retrieve("encoding/encodings/enc-123")
"""

import logging
import os
import sys
from types import TracebackType

import httpx

from bitmovin_sdk._internal.http import create_http_client
from bitmovin_sdk._internal.redaction import mask_secret
from bitmovin_sdk.exceptions import BitmovinConfigError

DEFAULT_API_BASE_URL = "https://api.bitmovin.com/v1/"
DEFAULT_TIMEOUT = 5

logger = logging.getLogger(__name__)

_debug_handler: logging.Handler | None = None


class Bitmovin:
    """Configured connection context for Bitmovin API calls.

    Bundles the API key, the base URL that relative endpoint paths are resolved
    against, and the HTTP transport. All three are fixed at construction.
    Build instances with `new_bitmovin()` or one of its default-applying
    wrappers, or with `Bitmovin.from_env()`.
    """

    def __init__(self, http_client: httpx.Client, api_key: str, api_base_url: str) -> None:
        self._http_client = http_client
        self._api_key = api_key
        self._api_base_url = api_base_url

    @classmethod
    def from_env(cls) -> "Bitmovin":
        """Create a client handle from environment variables.

        Required environment variables:
            BITMOVIN_API_KEY: The API key sent with every request.

        Optional environment variables:
            BITMOVIN_API_BASE_URL: Root URL of the API (default: public v1 API).
            BITMOVIN_TIMEOUT: Request timeout in whole seconds (default: 5).
            BITMOVIN_DEBUG: Set to "1" to log every request to stderr.

        Raises:
            BitmovinConfigError: If the API key is missing or the timeout is
                not an integer.
        """
        api_key = os.environ.get("BITMOVIN_API_KEY")
        if api_key is None:
            raise BitmovinConfigError("BITMOVIN_API_KEY is not set")

        base_url = os.environ.get("BITMOVIN_API_BASE_URL") or DEFAULT_API_BASE_URL

        raw_timeout = os.environ.get("BITMOVIN_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = int(raw_timeout)
        except ValueError as e:
            raise BitmovinConfigError(
                f"BITMOVIN_TIMEOUT must be an integer, got {raw_timeout!r}"
            ) from e

        if os.environ.get("BITMOVIN_DEBUG", "") == "1":
            enable_debug_logging()

        return new_bitmovin(api_key, base_url, timeout)

    @property
    def http_client(self) -> httpx.Client:
        """The transport used for every request made with this handle."""
        return self._http_client

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def timeout(self) -> float | None:
        """Request timeout in seconds the transport was configured with."""
        return self._http_client.timeout.read

    def close(self) -> None:
        """Close the underlying transport and release its connections."""
        self._http_client.close()

    def __enter__(self) -> "Bitmovin":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Bitmovin(api_key={mask_secret(self._api_key)!r}, "
            f"api_base_url={self._api_base_url!r}, timeout={self.timeout!r})"
        )


def new_bitmovin(api_key: str, base_url: str, timeout: int) -> Bitmovin:
    """Create a client handle.

    No validation is performed: empty strings are accepted and the timeout is
    handed to the transport as given, even when zero or negative.

    Args:
        api_key: The API key sent with every request.
        base_url: Root URL relative endpoint paths are appended to.
        timeout: Request timeout in seconds.

    Returns:
        A new Bitmovin handle owning a freshly created transport.
    """
    return Bitmovin(
        http_client=create_http_client(timeout=timeout),
        api_key=api_key,
        api_base_url=base_url,
    )


def new_bitmovin_default_timeout(api_key: str, base_url: str) -> Bitmovin:
    """Create a client handle with the default 5 second timeout."""
    return new_bitmovin(api_key, base_url, DEFAULT_TIMEOUT)


def new_bitmovin_default(api_key: str) -> Bitmovin:
    """Create a client handle for the public API with the default timeout."""
    return new_bitmovin_default_timeout(api_key, DEFAULT_API_BASE_URL)


def enable_debug_logging() -> None:
    """Send the SDK's debug log records to stderr."""
    global _debug_handler

    sdk_logger = logging.getLogger("bitmovin_sdk")
    if _debug_handler is None:
        _debug_handler = logging.StreamHandler(sys.stderr)
        _debug_handler.setFormatter(
            logging.Formatter("[bitmovin-sdk] %(levelname)s %(message)s")
        )
    if _debug_handler not in sdk_logger.handlers:
        sdk_logger.addHandler(_debug_handler)
    sdk_logger.setLevel(logging.DEBUG)
    logger.debug("Debug logging enabled")
