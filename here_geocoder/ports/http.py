"""HTTP transport port - Injectable GET abstraction.

Geocoding adapters only need to GET a URL and read the body back, so
the transport is reduced to a single method. Timeouts, proxies and
connection pooling are the transport's business.
"""

from __future__ import annotations

from typing import Protocol, Union


class HttpTransportPort(Protocol):
    """Port for HTTP transports.

    Implementations:
    - adapters/http/geopy_transport.py (GeopyHttpTransport) - Production
    - adapters/http/static_transport.py (StaticResponseTransport) - Testing
    """

    def get(self, url: str) -> Union[bytes, str]:
        """Perform a GET request and return the response body.

        Args:
            url: Fully built URL, query string included.

        Returns:
            The raw response body.

        Raises:
            TransportError: If the request could not be performed.
            InvalidCredentials: On HTTP 401 or 403.
            QuotaExceeded: On HTTP 429.
            InvalidServerResponse: On any other HTTP error status.
        """
        ...
