"""Tests for the geopy-backed HTTP transport."""

from unittest.mock import MagicMock, patch

import pytest
from geopy.adapters import AdapterHTTPError
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable

from here_geocoder.adapters.http import GeopyHttpTransport
from here_geocoder.config import HttpConfig
from here_geocoder.domain.errors import (
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    TransportError,
)

URL = "https://geocode.search.hereapi.com/v1/geocode?apiKey=secret&q=Paris"


class TestGeopyHttpTransport:
    """Test suite for GeopyHttpTransport."""

    @pytest.fixture
    def mock_adapter(self):
        """Patch geopy's RequestsAdapter with a mock instance."""
        with patch("here_geocoder.adapters.http.geopy_transport.RequestsAdapter") as cls:
            adapter = MagicMock()
            cls.return_value = adapter
            yield cls, adapter

    @pytest.fixture
    def transport(self):
        return GeopyHttpTransport(HttpConfig(user_agent="tests", timeout_seconds=3, max_retries=1))

    def http_error(self, status_code):
        return AdapterHTTPError(
            f"Non-successful status code {status_code}",
            status_code=status_code,
            headers={},
            text='{"error": "whatever"}',
        )

    def test_adapter_created_lazily(self, mock_adapter, transport):
        cls, _ = mock_adapter
        cls.assert_not_called()

        transport.get(URL)
        transport.get(URL)

        cls.assert_called_once_with(proxies=None, ssl_context=None, max_retries=1)

    def test_returns_body_bytes(self, mock_adapter, transport):
        _, adapter = mock_adapter
        adapter.get_text.return_value = '{"items": [{"address": {"city": "Zürich"}}]}'

        body = transport.get(URL)

        assert body == '{"items": [{"address": {"city": "Zürich"}}]}'.encode("utf-8")
        adapter.get_text.assert_called_once_with(
            URL, timeout=3, headers={"User-Agent": "tests"}
        )

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_status(self, mock_adapter, transport, status_code):
        _, adapter = mock_adapter
        adapter.get_text.side_effect = self.http_error(status_code)

        with pytest.raises(InvalidCredentials):
            transport.get(URL)

    def test_rate_limited_status(self, mock_adapter, transport):
        _, adapter = mock_adapter
        adapter.get_text.side_effect = self.http_error(429)

        with pytest.raises(QuotaExceeded):
            transport.get(URL)

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_other_status(self, mock_adapter, transport, status_code):
        _, adapter = mock_adapter
        adapter.get_text.side_effect = self.http_error(status_code)

        with pytest.raises(InvalidServerResponse) as excinfo:
            transport.get(URL)

        assert excinfo.value.status_code == status_code
        assert "secret" not in excinfo.value.url

    @pytest.mark.parametrize(
        "error",
        [
            GeocoderTimedOut("Service timed out"),
            GeocoderUnavailable("Name or service not known"),
            GeocoderServiceError("SSL handshake failed"),
        ],
    )
    def test_network_errors(self, mock_adapter, transport, error):
        _, adapter = mock_adapter
        adapter.get_text.side_effect = error

        with pytest.raises(TransportError) as excinfo:
            transport.get(URL)

        assert excinfo.value.__cause__ is error
        assert "secret" not in str(excinfo.value)

    @pytest.mark.parametrize("error_class", [GeocoderUnavailable, GeocoderServiceError])
    def test_network_error_message_hides_api_key(self, mock_adapter, transport, error_class, caplog):
        _, adapter = mock_adapter
        adapter.get_text.side_effect = error_class(
            "HTTPConnectionPool(host='127.0.0.1', port=1): Max retries exceeded with url: "
            "/v1/geocode?apiKey=secret&q=Paris&limit=5 (Caused by NewConnectionError)"
        )

        with caplog.at_level("DEBUG", logger="here_geocoder"):
            with pytest.raises(TransportError) as excinfo:
                transport.get(URL)

        assert "secret" not in str(excinfo.value)
        assert "Max retries exceeded" in str(excinfo.value)
        assert all("secret" not in getattr(record, "error", "") for record in caplog.records)
