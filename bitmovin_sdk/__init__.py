"""Bitmovin SDK for Python.

Public API:
    Bitmovin - Client handle (API key, base URL, HTTP transport)
    new_bitmovin - Build a handle from explicit settings
    new_bitmovin_default_timeout - Same, with the default 5 second timeout
    new_bitmovin_default - Same, for the public API endpoint
    RestService - Generic REST verbs on top of a handle
"""

from bitmovin_sdk._version import __version__
from bitmovin_sdk.client import (
    DEFAULT_API_BASE_URL,
    DEFAULT_TIMEOUT,
    Bitmovin,
    new_bitmovin,
    new_bitmovin_default,
    new_bitmovin_default_timeout,
)
from bitmovin_sdk.exceptions import BitmovinAPIError, BitmovinConfigError, BitmovinError
from bitmovin_sdk.rest import RestService

__all__ = [
    "__version__",
    "Bitmovin",
    "new_bitmovin",
    "new_bitmovin_default_timeout",
    "new_bitmovin_default",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "RestService",
    "BitmovinError",
    "BitmovinAPIError",
    "BitmovinConfigError",
]
