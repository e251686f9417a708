"""Immutable geocoding queries.

Queries are frozen dataclasses. Every ``with_*`` method returns a new
query, so a base query can be shared and specialized freely:

    base = GeocodeQuery.create("Barcelona").with_locale("ca")
    spain = base.with_data("country", "ES")
    venezuela = base.with_data("country", "VE")
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from .errors import InvalidArgument
from .models import Bounds, Coordinates

DEFAULT_RESULT_LIMIT = 5


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgument(f"Limit must be a positive integer, got {limit!r}")
    return limit


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """Forward geocoding query.

    Attributes:
        text: Free-text address to resolve
        locale: Optional language tag for the results (e.g. "fr-FR")
        limit: Maximum number of results to return
        bounds: Optional bounding box hint
        data: Provider-specific named values (country, state, county, city...)
    """

    text: str
    locale: Optional[str] = None
    limit: int = DEFAULT_RESULT_LIMIT
    bounds: Optional[Bounds] = None
    data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise InvalidArgument("Geocode query cannot be empty")
        _check_limit(self.limit)

    @classmethod
    def create(cls, text: str) -> GeocodeQuery:
        return cls(text=text)

    def with_text(self, text: str) -> GeocodeQuery:
        return replace(self, text=text)

    def with_locale(self, locale: Optional[str]) -> GeocodeQuery:
        return replace(self, locale=locale)

    def with_limit(self, limit: int) -> GeocodeQuery:
        return replace(self, limit=limit)

    def with_bounds(self, bounds: Optional[Bounds]) -> GeocodeQuery:
        return replace(self, bounds=bounds)

    def with_data(self, name: str, value: Any) -> GeocodeQuery:
        data = dict(self.data)
        data[name] = value
        return replace(self, data=data)

    def get_data(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """Reverse geocoding query.

    Attributes:
        coordinates: Position to describe
        locale: Optional language tag for the results
        limit: Maximum number of results to return
        data: Provider-specific named values
    """

    coordinates: Coordinates
    locale: Optional[str] = None
    limit: int = DEFAULT_RESULT_LIMIT
    data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        _check_limit(self.limit)

    @classmethod
    def create(cls, coordinates: Coordinates) -> ReverseQuery:
        return cls(coordinates=coordinates)

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(coordinates=Coordinates(float(latitude), float(longitude)))

    def with_coordinates(self, coordinates: Coordinates) -> ReverseQuery:
        return replace(self, coordinates=coordinates)

    def with_locale(self, locale: Optional[str]) -> ReverseQuery:
        return replace(self, locale=locale)

    def with_limit(self, limit: int) -> ReverseQuery:
        return replace(self, limit=limit)

    def with_data(self, name: str, value: Any) -> ReverseQuery:
        data = dict(self.data)
        data[name] = value
        return replace(self, data=data)

    def get_data(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)
