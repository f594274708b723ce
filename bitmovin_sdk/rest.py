"""Generic REST verbs issued through a Bitmovin client handle.

Endpoint-specific services build on `RestService`; it knows nothing about
individual resources and passes request and response bodies through as bytes.
"""

import json
import logging

import httpx
from pydantic import ValidationError

from bitmovin_sdk._internal.redaction import redact_headers, redact_payload
from bitmovin_sdk.client import Bitmovin
from bitmovin_sdk.exceptions import BitmovinAPIError
from bitmovin_sdk.models import ResponseEnvelope

DEFAULT_LIST_OFFSET = 0
DEFAULT_LIST_LIMIT = 25

logger = logging.getLogger(__name__)


class RestService:
    """Issues JSON requests against ``api_base_url + relative_url``.

    Every request carries the handle's API key in ``X-Api-Key``. Responses with
    a status code above 399 raise `BitmovinAPIError`; transport failures
    propagate as the httpx exceptions raised by the handle's client.
    """

    def __init__(self, bitmovin: Bitmovin) -> None:
        self._bitmovin = bitmovin

    @property
    def bitmovin(self) -> Bitmovin:
        return self._bitmovin

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Api-Key": self._bitmovin.api_key,
        }

    def _full_url(self, relative_url: str) -> str:
        # Concatenated, not joined: relative paths never start with "/".
        return self._bitmovin.api_base_url + relative_url

    def _request(
        self,
        method: str,
        relative_url: str,
        *,
        content: bytes | None = None,
        params: dict[str, int] | None = None,
    ) -> bytes:
        url = self._full_url(relative_url)
        headers = self._get_headers()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s headers=%s body=%s",
                method,
                url,
                redact_headers(headers),
                _describe_body(content),
            )

        response = self._bitmovin.http_client.request(
            method,
            url,
            content=content,
            params=params,
            headers=headers,
        )

        if response.status_code > 399:
            error = _api_error(response)
            logger.warning("%s %s failed: %s", method, url, error)
            raise error

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response.content

    def create(self, relative_url: str, body: bytes) -> bytes:
        """POST ``body`` to a collection and return the created resource."""
        return self._request("POST", relative_url, content=body)

    def retrieve(self, relative_url: str) -> bytes:
        """GET a single resource."""
        return self._request("GET", relative_url)

    def delete(self, relative_url: str) -> bytes:
        """DELETE a single resource."""
        return self._request("DELETE", relative_url)

    def list(
        self,
        relative_url: str,
        offset: int = DEFAULT_LIST_OFFSET,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> bytes:
        """GET one page of a collection.

        Args:
            relative_url: Path of the collection.
            offset: Index of the first item to return.
            limit: Maximum number of items in the page.
        """
        return self._request(
            "GET", relative_url, params={"offset": offset, "limit": limit}
        )

    def retrieve_custom_data(self, relative_url: str) -> bytes:
        """GET the user-defined custom data attached to a resource."""
        return self._request("GET", relative_url + "/customData")


def _api_error(response: httpx.Response) -> BitmovinAPIError:
    """Build the error raised for a failed response.

    Envelope bodies are rendered as ``<status> <code> (ReqId#<id>): <message>``;
    anything else falls back to the HTTP status line and raw body.
    """
    try:
        envelope = ResponseEnvelope.model_validate_json(response.content)
    except ValidationError:
        return BitmovinAPIError(
            f"HTTP {response.status_code} {response.reason_phrase}: {response.text}",
            status_code=response.status_code,
        )

    return BitmovinAPIError(
        envelope.format_error(),
        status_code=response.status_code,
        request_id=envelope.request_id,
        code=envelope.data.code,
        developer_message=envelope.data.developer_message,
    )


def _describe_body(content: bytes | None) -> object:
    if content is None:
        return None
    try:
        decoded = json.loads(content)
    except ValueError:
        return f"<{len(content)} bytes>"
    return redact_payload(decoded)
