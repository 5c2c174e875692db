"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def _parse_positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise ValueError("Identifier must be a positive integer")
    return parsed


@dataclass(frozen=True)
class GigId:
    """Unique identifier for a Gig."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))


@dataclass(frozen=True)
class ActId:
    """Unique identifier for an Act."""

    value: int


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: int


@dataclass(frozen=True)
class Money:
    """Whole-unit amount (fees, hire costs, ticket prices)."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
