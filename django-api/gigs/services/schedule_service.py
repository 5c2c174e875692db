"""Read-only schedule queries."""

from gigs.domain import GigId, ScheduleEntry
from gigs.domain.errors import GigNotFoundError
from gigs.stores.interfaces import GigStore


class ScheduleService:
    """Service for viewing gig running orders."""

    def __init__(self, store: GigStore) -> None:
        self._store = store

    def get_schedule(self, gig_id: int) -> list[ScheduleEntry]:
        """Return the running order of a gig, earliest act first.

        Raises:
            GigNotFoundError: If the gig does not exist.
        """
        gid = GigId(gig_id)
        if self._store.get_gig(gid) is None:
            raise GigNotFoundError(gig_id)
        return self._store.get_schedule(gid)
