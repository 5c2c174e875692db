"""Ticket sales."""

import logging

from gigs.domain import GigId, Ticket
from gigs.domain.errors import (
    GigAlreadyCancelledError,
    GigNotFoundError,
    GigSoldOutError,
    InvalidInputError,
    PersistenceFailureError,
    TicketPriceNotFoundError,
)
from gigs.stores.interfaces import GigStore

logger = logging.getLogger(__name__)


class TicketService:
    """Service for selling tickets to scheduled gigs."""

    def __init__(self, store: GigStore) -> None:
        self._store = store

    def purchase_ticket(self, gig_id: int, name: str, email: str, price_type: str) -> Ticket:
        """Sell one ticket at the gig's listed price for the ticket type.

        Raises:
            InvalidInputError: If the customer name or email is blank.
            GigNotFoundError: If the gig does not exist.
            GigAlreadyCancelledError: If the gig is cancelled.
            TicketPriceNotFoundError: If the gig has no price for this type.
            GigSoldOutError: If the venue is already at capacity.
            PersistenceFailureError: If storage rejects the write.
        """
        if not name or not name.strip():
            raise InvalidInputError("Customer name is required")
        if not email or not email.strip():
            raise InvalidInputError("Customer email is required")

        gid = GigId(gig_id)
        try:
            with self._store.atomic():
                gig = self._store.get_gig(gid, for_update=True)
                if gig is None:
                    raise GigNotFoundError(gig_id)
                if gig.is_cancelled:
                    raise GigAlreadyCancelledError(gig_id)

                cost = self._store.get_ticket_price(gid, price_type)
                if cost is None:
                    raise TicketPriceNotFoundError(gig_id, price_type)

                venue = self._store.get_venue(gig.venue_id)
                if self._store.count_tickets(gid) >= venue.capacity.value:
                    raise GigSoldOutError(gig_id)

                ticket = self._store.insert_ticket(gid, name, email, price_type, cost)
        except PersistenceFailureError:
            logger.exception("purchase_ticket failed (gig=%s, type=%r)", gig_id, price_type)
            raise

        logger.info("Sold %s ticket %s for gig %s", price_type, ticket.id, gig_id)
        return ticket
