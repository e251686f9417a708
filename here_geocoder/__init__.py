"""HERE geocoding provider.

Forward and reverse geocoding against the HERE Geocoding & Search API,
with results mapped to provider-independent address models:

    from here_geocoder import GeocodeQuery, GeopyHttpTransport, HereGeocoderAdapter

    geocoder = HereGeocoderAdapter(GeopyHttpTransport(), api_key="...")
    results = geocoder.geocode_query(
        GeocodeQuery.create("15 avenue Gambetta, Paris").with_locale("fr-FR")
    )
    print(results.first().locality)
"""

from .adapters.geocoding import HereGeocoderAdapter
from .adapters.http import GeopyHttpTransport, StaticResponseTransport
from .domain import (
    Address,
    AddressCollection,
    Bounds,
    CollectionIsEmpty,
    Coordinates,
    Country,
    GeocodeQuery,
    GeocoderError,
    HereAddress,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    OutOfBounds,
    QuotaExceeded,
    ReverseQuery,
    TransportError,
    UnsupportedOperation,
)
from .ports import GeocoderPort, HttpTransportPort

__version__ = "0.1.0"

__all__ = [
    "HereGeocoderAdapter",
    "GeopyHttpTransport",
    "StaticResponseTransport",
    "GeocoderPort",
    "HttpTransportPort",
    "GeocodeQuery",
    "ReverseQuery",
    "Address",
    "HereAddress",
    "AddressCollection",
    "Bounds",
    "Coordinates",
    "Country",
    "GeocoderError",
    "InvalidCredentials",
    "UnsupportedOperation",
    "QuotaExceeded",
    "InvalidArgument",
    "InvalidServerResponse",
    "TransportError",
    "CollectionIsEmpty",
    "OutOfBounds",
]
