"""Typed errors for the HERE geocoder.

A small closed set of error kinds replaces the exception hierarchy shared
by generic geocoding toolkits. Every error carries a human-readable
message and can optionally wrap the root cause exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoder.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidCredentials(GeocoderError):
    """The API key is missing, empty or rejected by the provider."""


@dataclass
class UnsupportedOperation(GeocoderError):
    """The provider cannot answer this kind of query."""


@dataclass
class QuotaExceeded(GeocoderError):
    """The request was valid but the account quota is exhausted."""


@dataclass
class InvalidArgument(GeocoderError):
    """A query or model value failed validation."""


@dataclass
class InvalidServerResponse(GeocoderError):
    """The provider answered with something we cannot use.

    Attributes:
        url: The requested URL (API key redacted)
        status_code: HTTP status code when the failure is status related
    """

    url: str = ""
    status_code: Optional[int] = None

    @classmethod
    def create(
        cls,
        url: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> InvalidServerResponse:
        if status_code is None:
            message = f'The geocoder server returned an invalid response for query "{url}".'
        else:
            message = (
                f'The geocoder server returned an invalid response ({status_code}) '
                f'for query "{url}". We could not parse it.'
            )
        return cls(message, cause=cause, url=url, status_code=status_code)

    @classmethod
    def empty_response(cls, url: str) -> InvalidServerResponse:
        return cls(
            f'The geocoder server returned an empty response for query "{url}".',
            url=url,
        )


@dataclass
class TransportError(GeocoderError):
    """The HTTP request itself failed (DNS, connection, timeout).

    Attributes:
        url: The requested URL (API key redacted)
    """

    url: str = ""


@dataclass
class CollectionIsEmpty(GeocoderError):
    """First element requested from an empty address collection."""

    message: str = "The collection is empty"


@dataclass
class OutOfBounds(GeocoderError):
    """Index outside of an address collection.

    Attributes:
        index: The index that was requested
    """

    index: int = 0
