"""Act cancellation service.

Cancelling an act either removes it and closes the gap it leaves, or, when
the act headlines or its removal would break the running order, cancels the
whole gig. Either outcome is written in one transaction.
"""

import logging

from gigs.domain import (
    DEFAULT_POLICY,
    ActRemoved,
    CancelOutcome,
    GigCancelled,
    GigId,
    SchedulingPolicy,
)
from gigs.domain.errors import (
    ActNotFoundError,
    ActNotInGigError,
    GigAlreadyCancelledError,
    GigNotFoundError,
    PersistenceFailureError,
)
from gigs.domain.headline import is_headline
from gigs.domain.lineup import would_violate_after_removal
from gigs.stores.interfaces import GigStore

logger = logging.getLogger(__name__)


class CancellationService:
    """Service for cancelling acts and gigs."""

    def __init__(self, store: GigStore, policy: SchedulingPolicy = DEFAULT_POLICY) -> None:
        self._store = store
        self._policy = policy

    def cancel_act(self, gig_id: int, act_name: str) -> CancelOutcome:
        """Cancel an act's performances in a gig.

        Returns GigCancelled with the distinct ticket holders to notify when
        the whole gig is called off, otherwise ActRemoved with the new
        running order.

        Raises:
            GigNotFoundError: If the gig does not exist.
            GigAlreadyCancelledError: If the gig is already cancelled.
            ActNotFoundError: If no act has this name.
            ActNotInGigError: If the act does not perform at this gig.
            PersistenceFailureError: If storage rejects any write.
        """
        gid = GigId(gig_id)
        step = "load gig"
        try:
            with self._store.atomic():
                gig = self._store.get_gig(gid, for_update=True)
                if gig is None:
                    raise GigNotFoundError(gig_id)
                if gig.is_cancelled:
                    raise GigAlreadyCancelledError(gig_id)

                act_id = self._store.find_act_id_by_name(act_name)
                if act_id is None:
                    raise ActNotFoundError(act_name)

                step = "load lineup"
                lineup = self._store.get_performances(gid)
                removed = [p for p in lineup if p.act_id == act_id]
                if not removed:
                    raise ActNotInGigError(gig_id, act_name)

                headline = is_headline(lineup, act_id)
                violation = None
                if not headline:
                    violation = would_violate_after_removal(
                        lineup, act_id, gig.start, self._policy
                    )

                if headline or violation is not None:
                    step = "cancel gig"
                    self._store.set_gig_status_cancelled(gid)
                    self._store.zero_ticket_costs(gid)
                    holders = self._store.distinct_ticket_holders(gid)
                    outcome = GigCancelled(gig_id=gid, affected_customers=tuple(holders))
                else:
                    step = "remove act"
                    latest_end = max(p.end for p in removed)
                    minutes = sum(p.duration_minutes for p in removed)
                    self._store.delete_performances(gid, act_id)
                    self._store.shift_performances_after(gid, latest_end, minutes)
                    schedule = self._store.get_schedule(gid)
                    outcome = ActRemoved(gig_id=gid, remaining_lineup=tuple(schedule))
        except PersistenceFailureError:
            logger.exception(
                "cancel_act failed at step %r (gig=%s, act=%r)", step, gig_id, act_name
            )
            raise

        if isinstance(outcome, GigCancelled):
            reason = "headline act" if headline else violation.rule.value
            logger.info(
                "Cancelled gig %s after losing %r (%s); %d customers affected",
                gig_id,
                act_name,
                reason,
                len(outcome.affected_customers),
            )
        else:
            logger.info(
                "Removed %r from gig %s; %d slots remain",
                act_name,
                gig_id,
                len(outcome.remaining_lineup),
            )
        return outcome
