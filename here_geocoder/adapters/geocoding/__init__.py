"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- HereGeocoderAdapter: HERE Geocoding & Search API v1
"""

from .here_adapter import HereGeocoderAdapter

__all__ = ["HereGeocoderAdapter"]
