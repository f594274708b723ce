"""Shared HTTP client configuration."""

import httpx

from bitmovin_sdk._version import __version__

CLIENT_NAME = "bitmovin-sdk-python"


def create_http_client(*, timeout: float) -> httpx.Client:
    """Create the transport owned by a client handle.

    Args:
        timeout: Request timeout in seconds, applied to every phase. Passed
            through unchanged, including zero or negative values.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={
            "User-Agent": f"bitmovin-sdk/{__version__}",
            "X-Api-Client": CLIENT_NAME,
            "X-Api-Client-Version": __version__,
        },
    )
