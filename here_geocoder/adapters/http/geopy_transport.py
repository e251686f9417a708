"""HTTP transport backed by geopy's requests adapter.

geopy already knows how to run geocoding GETs over a pooled requests
session and how to classify network failures. This transport reuses
that and only translates the outcome into this package's errors:

- timeouts, unreachable hosts and other network failures -> TransportError
- HTTP 401 / 403 -> InvalidCredentials
- HTTP 429 -> QuotaExceeded
- any other HTTP status >= 400 -> InvalidServerResponse
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from geopy.adapters import AdapterHTTPError, RequestsAdapter
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable

from ...config import HttpConfig, get_config
from ...domain.errors import (
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    TransportError,
)
from ...observability import redact_url


@dataclass
class GeopyHttpTransport:
    """GET transport using geopy.adapters.RequestsAdapter.

    The adapter (and its requests session) is created on first use.

    Attributes:
        config: HTTP configuration (user agent, timeout, retries)
    """

    config: HttpConfig = field(default_factory=lambda: get_config().http)

    _adapter: Optional[RequestsAdapter] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_adapter(self) -> RequestsAdapter:
        """Get or initialize the requests adapter."""
        if self._adapter is not None:
            return self._adapter

        self._logger.debug(
            "Initializing requests adapter",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        self._adapter = RequestsAdapter(
            proxies=None,
            ssl_context=None,
            max_retries=self.config.max_retries,
        )
        return self._adapter

    def get(self, url: str) -> bytes:
        """Perform a GET request and return the body as UTF-8 bytes."""
        safe_url = redact_url(url)

        try:
            text = self._get_adapter().get_text(
                url,
                timeout=self.config.timeout_seconds,
                headers={"User-Agent": self.config.user_agent},
            )
        except AdapterHTTPError as e:
            self._logger.warning(
                "HTTP error status",
                extra={"url": safe_url, "status_code": e.status_code},
            )
            raise self._status_error(e, safe_url) from e
        except (GeocoderTimedOut, GeocoderUnavailable) as e:
            detail = redact_url(str(e))
            self._logger.warning(
                "HTTP service unavailable",
                extra={"url": safe_url, "error": detail},
            )
            raise TransportError(f'Request to "{safe_url}" failed: {detail}', url=safe_url) from e
        except GeocoderServiceError as e:
            detail = redact_url(str(e))
            self._logger.error(
                "HTTP request failed",
                extra={"url": safe_url, "error": detail},
            )
            raise TransportError(f'Request to "{safe_url}" failed: {detail}', url=safe_url) from e

        return text.encode("utf-8")

    @staticmethod
    def _status_error(error: AdapterHTTPError, url: str) -> Exception:
        if error.status_code in (401, 403):
            return InvalidCredentials("Invalid or missing api key.", cause=error)
        if error.status_code == 429:
            return QuotaExceeded("Valid request but quota exceeded.", cause=error)
        return InvalidServerResponse.create(url, status_code=error.status_code, cause=error)
