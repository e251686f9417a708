"""Immutable address models.

All models are frozen dataclasses with slots. They have no external
dependencies and represent a geocoding result independently of the
provider that produced it. "With" methods return new instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidArgument


def _check_latitude(value: float, name: str = "Latitude") -> None:
    if not -90 <= value <= 90:
        raise InvalidArgument(f"{name} must be between -90 and 90, got {value}")


def _check_longitude(value: float, name: str = "Longitude") -> None:
    if not -180 <= value <= 180:
        raise InvalidArgument(f"{name} must be between -180 and 180, got {value}")


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates in floating point degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        _check_latitude(self.latitude)
        _check_longitude(self.longitude)

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True, slots=True)
class Bounds:
    """A bounding box.

    Providers do not always return south <= north or west <= east,
    so only the ranges of the individual values are checked.
    """

    south: float
    west: float
    north: float
    east: float

    def __post_init__(self) -> None:
        _check_latitude(self.south, "South")
        _check_latitude(self.north, "North")
        _check_longitude(self.west, "West")
        _check_longitude(self.east, "East")

    def to_dict(self) -> Dict[str, float]:
        return {
            "south": self.south,
            "west": self.west,
            "north": self.north,
            "east": self.east,
        }


@dataclass(frozen=True, slots=True)
class Country:
    """A country name and its code (upper-cased)."""

    name: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self) -> None:
        if self.code is not None:
            object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.name or ""


@dataclass(frozen=True, slots=True)
class Address:
    """A normalized geocoding result.

    Attributes:
        provided_by: Name of the provider that produced the address
        coordinates: Position of the result, if known
        bounds: Bounding box of the result, if known
        street_number: House number
        street_name: Street name
        postal_code: Postal code
        locality: City or town
        sub_locality: District within the locality
        country: Country name and code
        additional_data: Provider-specific values with no fixed slot
    """

    provided_by: str
    coordinates: Optional[Coordinates] = None
    bounds: Optional[Bounds] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    postal_code: Optional[str] = None
    locality: Optional[str] = None
    sub_locality: Optional[str] = None
    country: Optional[Country] = None
    additional_data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def get_additional_data(self) -> Dict[str, Any]:
        """Return a copy of the additional data."""
        return dict(self.additional_data)

    def get_additional_data_value(self, key: str, default: Any = None) -> Any:
        return self.additional_data.get(key, default)

    def has_additional_data_value(self, key: str) -> bool:
        return key in self.additional_data

    def with_additional_data(self, key: str, value: Any) -> Address:
        """Return a copy of this address with one more additional value."""
        data = dict(self.additional_data)
        data[key] = value
        return replace(self, additional_data=data)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the address into a JSON-ready dictionary."""
        return {
            "providedBy": self.provided_by,
            "latitude": self.coordinates.latitude if self.coordinates else None,
            "longitude": self.coordinates.longitude if self.coordinates else None,
            "bounds": self.bounds.to_dict() if self.bounds else None,
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "postalCode": self.postal_code,
            "locality": self.locality,
            "subLocality": self.sub_locality,
            "country": self.country.name if self.country else None,
            "countryCode": self.country.code if self.country else None,
            "additionalData": self.get_additional_data(),
        }


@dataclass(frozen=True, slots=True)
class HereAddress(Address):
    """Address returned by the HERE provider.

    The HERE location id and result type live in the additional data
    under ``locationId`` and ``locationType``.
    """

    @property
    def location_id(self) -> Optional[str]:
        return self.additional_data.get("locationId")

    @property
    def location_type(self) -> Optional[str]:
        return self.additional_data.get("locationType")

    def with_location_id(self, location_id: Optional[str]) -> HereAddress:
        return self.with_additional_data("locationId", location_id)  # type: ignore[return-value]

    def with_location_type(self, location_type: Optional[str]) -> HereAddress:
        return self.with_additional_data("locationType", location_type)  # type: ignore[return-value]
