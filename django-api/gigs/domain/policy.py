"""Tunable scheduling limits. Defaults are the venue-booking house rules."""

from dataclasses import dataclass
from datetime import time, timedelta


@dataclass(frozen=True)
class SchedulingPolicy:
    """Limits the lineup rules are evaluated against."""

    min_interval: timedelta = timedelta(minutes=10)
    max_interval: timedelta = timedelta(minutes=30)
    min_gig_length: timedelta = timedelta(minutes=60)
    # Matched case-sensitively against act genres.
    early_curfew_genres: frozenset[str] = frozenset({"rock", "pop"})
    # Same calendar day as the gig start.
    early_curfew: time = time(23, 0)
    # Calendar day after the gig start.
    late_curfew: time = time(1, 0)
    earliest_start_hour: int = 9
    latest_start_hour: int = 23
    # When the front act is cancelled and the next act already sits on the gig
    # start, a zero gap is rejected unless this is set.
    allow_zero_front_gap: bool = False

    def __post_init__(self) -> None:
        if self.min_interval > self.max_interval:
            raise ValueError("min_interval cannot exceed max_interval")
        if not 0 <= self.earliest_start_hour <= self.latest_start_hour <= 23:
            raise ValueError("Start hours must satisfy 0 <= earliest <= latest <= 23")


DEFAULT_POLICY = SchedulingPolicy()
