"""Domain primitives that enforce validity at creation time."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class ApartmentId:
    """Unique identifier for an Apartment."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class DiscountPercent:
    """Percentage off, between 0 and 100 inclusive."""

    value: Decimal

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError("Discount percent must be between 0 and 100")


@dataclass(frozen=True)
class ApartmentKeyResolver:
    """Maps an apartment's display name to its reservation-store key.

    Bookings are filed under a short key rather than the catalog name.
    Names missing from the mapping fall back to their lowercased form.
    """

    mapping: Mapping[str, str] = field(default_factory=dict)

    def resolve(self, name: str) -> str:
        return self.mapping.get(name, name.lower())


def to_day(value: date | datetime | str) -> date:
    """Strip time of day, parsing ISO-8601 strings.

    Raises:
        ValueError: If a string is not an ISO-8601 date or datetime.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    raise ValueError(f"Unsupported date value: {value!r}")
