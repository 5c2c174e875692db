from gigs.domain.models import (
    ADULT_PRICE_TYPE,
    Act,
    ActRemoved,
    CancelOutcome,
    Gig,
    GigCancelled,
    GigStatus,
    Performance,
    ScheduleEntry,
    Ticket,
    TicketHolder,
    Venue,
)
from gigs.domain.policy import DEFAULT_POLICY, SchedulingPolicy
from gigs.domain.value_objects import ActId, Capacity, GigId, Money, VenueId

__all__ = [
    "ADULT_PRICE_TYPE",
    "Act",
    "ActRemoved",
    "CancelOutcome",
    "Gig",
    "GigCancelled",
    "GigStatus",
    "Performance",
    "ScheduleEntry",
    "Ticket",
    "TicketHolder",
    "Venue",
    "SchedulingPolicy",
    "DEFAULT_POLICY",
    "ActId",
    "GigId",
    "VenueId",
    "Money",
    "Capacity",
]
