"""Ordered, immutable collection of geocoding results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .errors import CollectionIsEmpty, OutOfBounds
from .models import Address


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Addresses in the order the provider returned them."""

    addresses: tuple[Address, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, addresses: Iterable[Address]) -> AddressCollection:
        return cls(tuple(addresses))

    def first(self) -> Address:
        """Return the first address.

        Raises:
            CollectionIsEmpty: If there is no address.
        """
        if not self.addresses:
            raise CollectionIsEmpty()
        return self.addresses[0]

    def get(self, index: int) -> Address:
        if not self.has(index):
            raise OutOfBounds(f"Index {index} is out of bounds", index=index)
        return self.addresses[index]

    def has(self, index: int) -> bool:
        return 0 <= index < len(self.addresses)

    def slice(self, offset: int, length: Optional[int] = None) -> tuple[Address, ...]:
        end = None if length is None else offset + length
        return self.addresses[offset:end]

    def all(self) -> tuple[Address, ...]:
        return self.addresses

    @property
    def is_empty(self) -> bool:
        return len(self.addresses) == 0

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    def __bool__(self) -> bool:
        return bool(self.addresses)
