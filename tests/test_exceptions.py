"""Tests for public exceptions."""

import pytest

from bitmovin_sdk.exceptions import BitmovinAPIError, BitmovinConfigError, BitmovinError


class TestBitmovinError:
    """Tests for base BitmovinError."""

    def test_is_exception(self):
        """BitmovinError should be an Exception."""
        assert issubclass(BitmovinError, Exception)

    def test_can_be_raised(self):
        """BitmovinError should be raisable with message."""
        with pytest.raises(BitmovinError) as exc_info:
            raise BitmovinError("test error")
        assert str(exc_info.value) == "test error"


class TestBitmovinAPIError:
    """Tests for BitmovinAPIError."""

    def test_inherits_from_bitmovin_error(self):
        """BitmovinAPIError should inherit from BitmovinError."""
        assert issubclass(BitmovinAPIError, BitmovinError)

    def test_with_message_only(self):
        """Should leave every detail unset."""
        error = BitmovinAPIError("API request failed")
        assert str(error) == "API request failed"
        assert error.status_code is None
        assert error.request_id is None
        assert error.code is None
        assert error.developer_message is None

    def test_with_envelope_details(self):
        """Should store status code and envelope fields."""
        error = BitmovinAPIError(
            "ERROR 1000 (ReqId#req-1): Not found",
            status_code=404,
            request_id="req-1",
            code=1000,
            developer_message="Encoding does not exist",
        )
        assert error.status_code == 404
        assert error.request_id == "req-1"
        assert error.code == 1000
        assert error.developer_message == "Encoding does not exist"

    def test_can_be_caught_as_bitmovin_error(self):
        """Should be catchable as BitmovinError."""
        with pytest.raises(BitmovinError):
            raise BitmovinAPIError("API error", status_code=500)


class TestBitmovinConfigError:
    """Tests for BitmovinConfigError."""

    def test_inherits_from_bitmovin_error(self):
        """BitmovinConfigError should inherit from BitmovinError."""
        assert issubclass(BitmovinConfigError, BitmovinError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(BitmovinConfigError) as exc_info:
            raise BitmovinConfigError("BITMOVIN_API_KEY is not set")
        assert str(exc_info.value) == "BITMOVIN_API_KEY is not set"
