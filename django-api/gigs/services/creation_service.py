"""Gig creation service.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

A gig, its whole lineup and its adult ticket price are written in one
transaction. Any rejected rule or storage failure leaves nothing behind.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from gigs.domain import (
    ADULT_PRICE_TYPE,
    DEFAULT_POLICY,
    Gig,
    Money,
    Performance,
    SchedulingPolicy,
)
from gigs.domain.errors import (
    ActNotFoundError,
    InvalidInputError,
    LineupValidationError,
    PersistenceFailureError,
    VenueNotFoundError,
)
from gigs.domain.lineup import (
    RuleViolation,
    check_start_window,
    first_violation,
    sort_lineup,
)
from gigs.stores.interfaces import GigStore

logger = logging.getLogger(__name__)


class GigCreationService:
    """Service for booking new gigs."""

    def __init__(self, store: GigStore, policy: SchedulingPolicy = DEFAULT_POLICY) -> None:
        self._store = store
        self._policy = policy

    def create_gig(
        self,
        venue_name: str,
        title: str,
        start: datetime,
        adult_price: int,
        performances: Sequence[Performance],
    ) -> Gig:
        """Create a scheduled gig with its lineup and adult ticket price.

        Raises:
            InvalidInputError: If the title is blank, the lineup is empty or
                the price is negative.
            VenueNotFoundError: If no venue has this name.
            ActNotFoundError: If any performance references an unknown act.
            LineupValidationError: If the lineup breaks a scheduling rule.
            PersistenceFailureError: If storage rejects any write.
        """
        if not title or not title.strip():
            raise InvalidInputError("Gig title is required")
        if not performances:
            raise InvalidInputError("A gig needs at least one performance")
        if adult_price < 0:
            raise InvalidInputError("Ticket price cannot be negative")

        step = "resolve venue"
        try:
            with self._store.atomic():
                venue_id = self._store.find_venue_id_by_name(venue_name)
                if venue_id is None:
                    raise VenueNotFoundError(venue_name)

                lineup = sort_lineup(performances)
                self._enforce(check_start_window(start, self._policy))

                step = "resolve acts"
                genres = self._collect_genres(lineup)

                self._enforce(first_violation(lineup, start, genres, self._policy))

                step = "insert gig"
                gig_id = self._store.insert_gig(venue_id, title, start)
                step = "insert performances"
                for performance in lineup:
                    self._store.insert_performance(gig_id, performance)
                step = "insert ticket price"
                self._store.insert_ticket_price(gig_id, ADULT_PRICE_TYPE, Money(adult_price))

                gig = self._store.get_gig(gig_id)
        except PersistenceFailureError:
            logger.exception(
                "create_gig failed at step %r (venue=%r, title=%r)", step, venue_name, title
            )
            raise

        logger.info(
            "Created gig %s %r at %s with %d performances",
            gig.id.value,
            gig.title,
            venue_name,
            len(lineup),
        )
        return gig

    def _collect_genres(self, lineup: Sequence[Performance]) -> set[str]:
        genres = set()
        for performance in lineup:
            act = self._store.get_act(performance.act_id)
            if act is None:
                raise ActNotFoundError(performance.act_id.value)
            genres.add(act.genre)
        return genres

    def _enforce(self, violation: RuleViolation | None) -> None:
        if violation is None:
            return
        logger.info("Rejected gig lineup (%s): %s", violation.rule.value, violation.message)
        raise LineupValidationError(violation)
