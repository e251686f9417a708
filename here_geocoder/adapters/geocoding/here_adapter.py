"""HERE geocoder adapter.

Translates GeocodeQuery / ReverseQuery objects into calls against the
HERE Geocoding & Search API v1 and maps the JSON answers to HereAddress
objects. One query is one GET through the injected transport; nothing
is cached or retried here.
"""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from urllib.parse import quote

from pydantic import ValidationError

from ...config import HereConfig, get_config
from ...domain.collection import AddressCollection
from ...domain.errors import (
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from ...domain.models import Bounds, Coordinates, Country, HereAddress
from ...domain.queries import GeocodeQuery, ReverseQuery
from ...observability import redact_url
from ...ports.http import HttpTransportPort
from .here_schema import HereItem, HereResponse

PROVIDER_NAME = "Here"

# Structured filters sent in the qualified query, in this order.
QUALIFIED_QUERY_FIELDS = ("country", "state", "county", "city")

# (attribute on HereItem, additional data key)
ITEM_ADDITIONAL_FIELDS = (
    ("distance", "distance"),
    ("house_number_type", "houseNumberType"),
    ("address_block_type", "addressBlockType"),
    ("locality_type", "localityType"),
    ("administrative_area_type", "administrativeAreaType"),
    ("house_number_fallback", "houseNumberFallback"),
)

# (attribute on HereAddressFields, additional data key)
ADDRESS_ADDITIONAL_FIELDS = (
    ("label", "label"),
    ("subdistrict", "subdistrict"),
    ("block", "block"),
    ("subblock", "subblock"),
    ("state", "state"),
    ("county", "county"),
)


def _escape(value: Any) -> str:
    """Percent-encode like RFC 3986 ``rawurlencode``."""
    return quote(str(value), safe="")


def _is_ip_address(text: str) -> bool:
    # zone ids (fe80::1%eth0) are not plain IP literals
    if "%" in text:
        return False
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


@dataclass
class HereGeocoderAdapter:
    """HERE implementation of GeocoderPort.

    Attributes:
        transport: HTTP transport used for every request
        api_key: HERE API key; None reads HERE_API_KEY from configuration
        config: Endpoints configuration
    """

    transport: HttpTransportPort
    api_key: Optional[str] = field(default=None, repr=False)
    config: HereConfig = field(default_factory=lambda: get_config().here)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

        if self.api_key is None and self.config.api_key is not None:
            self.api_key = self.config.api_key.get_secret_value()

        if not self.api_key:
            raise InvalidCredentials("Invalid or missing api key.")

    def get_name(self) -> str:
        return PROVIDER_NAME

    def geocode(
        self, text: str, locale: Optional[str] = None, limit: Optional[int] = None
    ) -> AddressCollection:
        query = GeocodeQuery.create(text).with_locale(locale)
        if limit is not None:
            query = query.with_limit(limit)
        return self.geocode_query(query)

    def reverse(
        self,
        latitude: float,
        longitude: float,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AddressCollection:
        query = ReverseQuery.from_coordinates(latitude, longitude).with_locale(locale)
        if limit is not None:
            query = query.with_limit(limit)
        return self.reverse_query(query)

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Geocode a free-text address.

        Raises:
            UnsupportedOperation: If the text is an IP address.
        """
        # This API doesn't handle IPs
        if _is_ip_address(query.text):
            raise UnsupportedOperation(
                "The Here provider does not support IP addresses, only street addresses."
            )

        return self._execute_query(self.build_geocode_url(query), query.limit)

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        return self._execute_query(self.build_reverse_url(query), query.limit)

    def build_geocode_url(self, query: GeocodeQuery) -> str:
        url = (
            f"{self.config.geocode_endpoint}"
            f"?apiKey={_escape(self.api_key)}&q={_escape(query.text)}"
        )

        if query.locale is not None:
            url = f"{url}&lang={_escape(query.locale)}"

        url = f"{url}&limit={query.limit}"

        qualified = self._build_qualified_query(query)
        if qualified is not None:
            url = f"{url}&qq={qualified}"

        return url

    def build_reverse_url(self, query: ReverseQuery) -> str:
        coordinates = query.coordinates
        url = (
            f"{self.config.reverse_endpoint}"
            f"?apiKey={_escape(self.api_key)}"
            f"&at={coordinates.latitude},{coordinates.longitude}"
        )

        url = f"{url}&limit={query.limit}"

        if query.locale is not None:
            url = f"{url}&lang={_escape(query.locale)}"

        return url

    @staticmethod
    def _build_qualified_query(query: GeocodeQuery) -> Optional[str]:
        """Join the structured filters as ``key=value;key=value``."""
        parts = [
            f"{name}={_escape(query.get_data(name))}"
            for name in QUALIFIED_QUERY_FIELDS
            if query.get_data(name) is not None
        ]
        return ";".join(parts) if parts else None

    def _execute_query(self, url: str, limit: int) -> AddressCollection:
        safe_url = redact_url(url)
        self._logger.debug("Here request", extra={"url": safe_url})

        content = self.transport.get(url)
        response = self._parse(content, safe_url)

        if response.error is not None:
            self._logger.warning(
                "Here API error",
                extra={
                    "url": safe_url,
                    "error": response.error,
                    "error_description": response.error_description,
                },
            )
            self._raise_api_error(response, safe_url)

        if not response.items:
            self._logger.debug("Here returned no result", extra={"url": safe_url})
            return AddressCollection()

        results: list[HereAddress] = []
        for item in response.items:
            results.append(self._build_address(item))

            if len(results) >= limit:
                break

        self._logger.debug(
            "Here success",
            extra={"url": safe_url, "count": len(results), "received": len(response.items)},
        )
        return AddressCollection.of(results)

    @staticmethod
    def _parse(content: Union[bytes, str, None], url: str) -> HereResponse:
        if not content:
            raise InvalidServerResponse.empty_response(url)

        try:
            return HereResponse.model_validate_json(content)
        except ValidationError as e:
            raise InvalidServerResponse.create(url, cause=e) from e

    @staticmethod
    def _raise_api_error(response: HereResponse, url: str) -> None:
        if response.error == "Unauthorized":
            raise InvalidCredentials("Invalid or missing api key.")
        if response.error == "QuotaExceeded":
            raise QuotaExceeded("Valid request but quota exceeded.")
        if response.error == "InvalidCredentials":
            raise InvalidArgument("Input parameter validation failed.")

        raise InvalidServerResponse(
            f'The Here API answered "{response.error}" for query "{url}".',
            url=url,
        )

    def _build_address(self, item: HereItem) -> HereAddress:
        address = item.address

        coordinates = None
        if item.position is not None:
            coordinates = Coordinates(item.position.lat, item.position.lng)

        bounds = None
        if item.map_view is not None:
            view = item.map_view
            bounds = Bounds(view.south, view.west, view.north, view.east)

        country = None
        if address.country_name is not None or address.country_code is not None:
            country = Country(name=address.country_name, code=address.country_code)

        additional_data: dict[str, Any] = {
            "locationId": item.id,
            "locationType": item.result_type,
        }

        for attribute, key in ITEM_ADDITIONAL_FIELDS:
            if attribute in item.model_fields_set:
                additional_data[key] = getattr(item, attribute)

        for attribute, key in ADDRESS_ADDITIONAL_FIELDS:
            if attribute in address.model_fields_set:
                additional_data[key] = getattr(address, attribute)

        return HereAddress(
            provided_by=self.get_name(),
            coordinates=coordinates,
            bounds=bounds,
            street_number=address.house_number,
            street_name=address.street,
            postal_code=address.postal_code,
            locality=address.city,
            sub_locality=address.district,
            country=country,
            additional_data=additional_data,
        )
