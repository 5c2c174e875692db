"""Headline slot resolution."""

from collections.abc import Sequence

from gigs.domain.models import Performance
from gigs.domain.value_objects import ActId


def headline_acts(lineup: Sequence[Performance]) -> frozenset[ActId]:
    """Return every act with a performance ending at the latest finish time."""
    if not lineup:
        return frozenset()
    last_finish = max(p.end for p in lineup)
    return frozenset(p.act_id for p in lineup if p.end == last_finish)


def is_headline(lineup: Sequence[Performance], act_id: ActId) -> bool:
    """An act headlines if it is the only act billed or shares the latest finish."""
    acts = {p.act_id for p in lineup}
    if acts == {act_id}:
        return True
    return act_id in headline_acts(lineup)
