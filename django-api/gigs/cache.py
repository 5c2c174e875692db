"""Cache keys shared by the schedule view and invalidation signals."""


def schedule_key(gig_id: int) -> str:
    return f"gigs:{gig_id}:schedule"
