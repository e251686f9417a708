"""Static transport for tests and offline use.

This transport never touches the network. It answers every GET with a
canned body, remembers the URLs it was asked for, and can be told to
fail instead.

Example:
    transport = StaticResponseTransport('{"items": []}')
    adapter = HereGeocoderAdapter(transport, api_key="key")
    adapter.geocode("Paris")
    assert "q=Paris" in transport.requests[0]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

Body = Union[bytes, str]


@dataclass
class StaticResponseTransport:
    """In-memory HTTP transport.

    Attributes:
        body: Default response body
        routes: Bodies keyed by a URL substring; the first match wins
        error: Exception raised by every GET when set
        requests: URLs requested so far, in order
    """

    body: Body = ""
    routes: Dict[str, Body] = field(default_factory=dict)
    error: Optional[Exception] = None
    requests: List[str] = field(default_factory=list)

    def get(self, url: str) -> Body:
        self.requests.append(url)

        if self.error is not None:
            raise self.error

        for fragment, body in self.routes.items():
            if fragment in url:
                return body
        return self.body

    @property
    def last_url(self) -> Optional[str]:
        return self.requests[-1] if self.requests else None

    def reset(self) -> None:
        """Forget the recorded requests."""
        self.requests.clear()
