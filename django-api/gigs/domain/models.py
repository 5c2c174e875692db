"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in gigs/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from gigs.domain.value_objects import ActId, Capacity, GigId, Money, VenueId

ADULT_PRICE_TYPE = "A"


class GigStatus(Enum):
    """Lifecycle of a gig. CANCELLED is terminal."""

    SCHEDULED = "G"
    CANCELLED = "C"


def format_clock(moment: datetime) -> str:
    """Format a timestamp as zero-padded 24-hour HH:MM."""
    return moment.strftime("%H:%M")


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    name: str
    hire_cost: Money
    capacity: Capacity


@dataclass(frozen=True)
class Act:
    """Domain representation of an Act."""

    id: ActId
    name: str
    genre: str
    standard_fee: Money


@dataclass(frozen=True)
class Performance:
    """One act's timed slot within a gig.

    The end time is always derived from start and duration.
    """

    act_id: ActId
    fee: Money
    start: datetime
    duration_minutes: int

    def __post_init__(self) -> None:
        if self.duration_minutes <= 0:
            raise ValueError("Performance duration must be positive")

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)

    def shifted(self, minutes_earlier: int) -> "Performance":
        return Performance(
            act_id=self.act_id,
            fee=self.fee,
            start=self.start - timedelta(minutes=minutes_earlier),
            duration_minutes=self.duration_minutes,
        )


@dataclass(frozen=True)
class Gig:
    """Domain representation of a Gig."""

    id: GigId
    venue_id: VenueId
    title: str
    start: datetime
    status: GigStatus

    @property
    def is_cancelled(self) -> bool:
        return self.status is GigStatus.CANCELLED


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a sold Ticket."""

    id: int
    gig_id: GigId
    customer_name: str
    customer_email: str
    price_type: str
    cost: Money


@dataclass(frozen=True)
class ScheduleEntry:
    """One row of a gig's published running order."""

    act_name: str
    start: str
    end: str

    @classmethod
    def for_performance(cls, act_name: str, performance: Performance) -> "ScheduleEntry":
        return cls(
            act_name=act_name,
            start=format_clock(performance.start),
            end=format_clock(performance.end),
        )

    def as_row(self) -> tuple[str, str, str]:
        return (self.act_name, self.start, self.end)


@dataclass(frozen=True, order=True)
class TicketHolder:
    """A distinct (name, email) pair holding tickets for a gig."""

    name: str
    email: str


@dataclass(frozen=True)
class GigCancelled:
    """Outcome of a cancellation that escalated to the whole gig."""

    gig_id: GigId
    affected_customers: tuple[TicketHolder, ...] = ()


@dataclass(frozen=True)
class ActRemoved:
    """Outcome of a cancellation that removed a single act."""

    gig_id: GigId
    remaining_lineup: tuple[ScheduleEntry, ...] = ()


CancelOutcome = GigCancelled | ActRemoved
