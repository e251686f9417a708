"""Geocoding port - Abstraction for forward and reverse geocoding.

This protocol defines the contract for geocoding providers, allowing
different implementations (HERE, Nominatim, Google Maps, etc.) to be used
interchangeably by callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.collection import AddressCollection
    from ..domain.queries import GeocodeQuery, ReverseQuery


class GeocoderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/here_adapter.py

    Errors are raised as subclasses of GeocoderError; an empty
    collection means the provider found nothing.
    """

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Resolve a free-text address to locations.

        Args:
            query: The forward geocoding query.

        Returns:
            Matching addresses, at most ``query.limit`` of them.
        """
        ...

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Resolve coordinates to addresses.

        Args:
            query: The reverse geocoding query.

        Returns:
            Matching addresses, at most ``query.limit`` of them.
        """
        ...

    def geocode(
        self, text: str, locale: Optional[str] = None, limit: Optional[int] = None
    ) -> AddressCollection:
        """Shortcut building a GeocodeQuery from plain values."""
        ...

    def reverse(
        self,
        latitude: float,
        longitude: float,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AddressCollection:
        """Shortcut building a ReverseQuery from plain values."""
        ...

    def get_name(self) -> str:
        """Return the provider name stamped on every address."""
        ...
