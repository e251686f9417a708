"""Domain layer - Queries, address models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .collection import AddressCollection
from .errors import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    OutOfBounds,
    QuotaExceeded,
    TransportError,
    UnsupportedOperation,
)
from .models import Address, Bounds, Coordinates, Country, HereAddress
from .queries import DEFAULT_RESULT_LIMIT, GeocodeQuery, ReverseQuery

__all__ = [
    # Models
    "Coordinates",
    "Bounds",
    "Country",
    "Address",
    "HereAddress",
    "AddressCollection",
    # Queries
    "DEFAULT_RESULT_LIMIT",
    "GeocodeQuery",
    "ReverseQuery",
    # Errors
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
