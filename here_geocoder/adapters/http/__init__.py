"""HTTP adapters - Implementations of HttpTransportPort.

Available implementations:
- GeopyHttpTransport: real HTTP through geopy's requests adapter
- StaticResponseTransport: canned responses for tests (never hits the network)
"""

from .geopy_transport import GeopyHttpTransport
from .static_transport import StaticResponseTransport

__all__ = ["GeopyHttpTransport", "StaticResponseTransport"]
