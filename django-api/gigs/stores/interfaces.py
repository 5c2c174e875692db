"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from gigs.domain import (
    Act,
    ActId,
    Gig,
    GigId,
    Money,
    Performance,
    ScheduleEntry,
    Ticket,
    TicketHolder,
    Venue,
    VenueId,
)


class GigStore(ABC):
    """Interface for gig persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a transaction scope.

        Leaving the scope normally commits; leaving it with an exception rolls
        back every write made inside it. Storage failures surface as
        PersistenceFailureError.
        """
        ...

    # Catalog lookups

    @abstractmethod
    def find_venue_id_by_name(self, name: str) -> VenueId | None:
        """Return the id of the venue with this exact name, or None."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...

    @abstractmethod
    def get_act(self, act_id: ActId) -> Act | None:
        """Return an act by ID, or None if not found."""
        ...

    @abstractmethod
    def find_act_id_by_name(self, name: str) -> ActId | None:
        """Return the id of the act with this exact name, or None."""
        ...

    # Gigs and lineups

    @abstractmethod
    def get_gig(self, gig_id: GigId, *, for_update: bool = False) -> Gig | None:
        """Return a gig by ID, or None. for_update locks the row until the scope ends."""
        ...

    @abstractmethod
    def get_performances(self, gig_id: GigId) -> list[Performance]:
        """Return all performances for a gig, ordered by start ascending."""
        ...

    @abstractmethod
    def get_schedule(self, gig_id: GigId) -> list[ScheduleEntry]:
        """Return the running order for a gig, ordered by start ascending."""
        ...

    @abstractmethod
    def insert_gig(self, venue_id: VenueId, title: str, start: datetime) -> GigId:
        """Insert a scheduled gig and return its generated id."""
        ...

    @abstractmethod
    def insert_performance(self, gig_id: GigId, performance: Performance) -> None:
        ...

    @abstractmethod
    def insert_ticket_price(self, gig_id: GigId, price_type: str, price: Money) -> None:
        ...

    @abstractmethod
    def delete_performances(self, gig_id: GigId, act_id: ActId) -> int:
        """Delete every performance of an act in a gig. Returns rows deleted."""
        ...

    @abstractmethod
    def shift_performances_after(
        self, gig_id: GigId, threshold: datetime, minutes_earlier: int
    ) -> int:
        """Move performances starting strictly after threshold earlier. Returns rows moved."""
        ...

    @abstractmethod
    def set_gig_status_cancelled(self, gig_id: GigId) -> None:
        ...

    # Tickets

    @abstractmethod
    def get_ticket_price(self, gig_id: GigId, price_type: str) -> Money | None:
        ...

    @abstractmethod
    def count_tickets(self, gig_id: GigId) -> int:
        ...

    @abstractmethod
    def insert_ticket(
        self, gig_id: GigId, name: str, email: str, price_type: str, cost: Money
    ) -> Ticket:
        ...

    @abstractmethod
    def zero_ticket_costs(self, gig_id: GigId) -> int:
        """Set the cost of every ticket for a gig to zero. Returns rows updated."""
        ...

    @abstractmethod
    def distinct_ticket_holders(self, gig_id: GigId) -> list[TicketHolder]:
        """Return distinct (name, email) pairs holding tickets, ordered by name."""
        ...

