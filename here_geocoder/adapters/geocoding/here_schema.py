"""Pydantic models for the HERE Geocoding & Search v1 responses.

Only the fields the adapter consumes are declared; anything else the API
sends is ignored. Every field is optional, and ``model_fields_set`` tells
whether the API actually sent a field, even when its value is null.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HereModel(BaseModel):
    """Base model mapping snake_case attributes to the API's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class HerePosition(HereModel):
    lat: float
    lng: float


class HereMapView(HereModel):
    south: float
    west: float
    north: float
    east: float


class HereAddressFields(HereModel):
    """The ``address`` block of a result item."""

    label: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    subdistrict: Optional[str] = None
    street: Optional[str] = None
    block: Optional[str] = None
    subblock: Optional[str] = None
    postal_code: Optional[str] = None
    house_number: Optional[str] = None


class HereItem(HereModel):
    """One entry of the ``items`` array."""

    id: Optional[str] = None
    result_type: Optional[str] = None
    position: Optional[HerePosition] = None
    map_view: Optional[HereMapView] = None
    address: HereAddressFields = Field(default_factory=HereAddressFields)
    distance: Optional[Union[int, float]] = None
    house_number_type: Optional[str] = None
    address_block_type: Optional[str] = None
    locality_type: Optional[str] = None
    administrative_area_type: Optional[str] = None
    house_number_fallback: Optional[bool] = None


class HereResponse(HereModel):
    """Top-level response body.

    Error responses carry ``error`` (and usually ``error_description``,
    which the API spells in snake_case) instead of ``items``.
    """

    error: Optional[str] = None
    error_description: Optional[str] = Field(default=None, alias="error_description")
    items: Optional[List[HereItem]] = None
