"""App settings read from the GIG_SCHEDULING dict in Django settings."""

from datetime import time, timedelta

from django.conf import settings

from gigs.domain.policy import SchedulingPolicy

DEFAULT_SCHEDULE_CACHE_TIMEOUT = 300


def _setting(name: str, default):
    return getattr(settings, "GIG_SCHEDULING", {}).get(name, default)


def _clock(value: str | time) -> time:
    if isinstance(value, time):
        return value
    return time.fromisoformat(value)


def scheduling_policy() -> SchedulingPolicy:
    """Build the active SchedulingPolicy from settings, falling back to defaults."""
    defaults = SchedulingPolicy()
    return SchedulingPolicy(
        min_interval=timedelta(
            minutes=_setting("MIN_INTERVAL_MINUTES", defaults.min_interval.seconds // 60)
        ),
        max_interval=timedelta(
            minutes=_setting("MAX_INTERVAL_MINUTES", defaults.max_interval.seconds // 60)
        ),
        min_gig_length=timedelta(
            minutes=_setting("MIN_GIG_MINUTES", defaults.min_gig_length.seconds // 60)
        ),
        early_curfew_genres=frozenset(
            _setting("EARLY_CURFEW_GENRES", defaults.early_curfew_genres)
        ),
        early_curfew=_clock(_setting("EARLY_CURFEW", defaults.early_curfew)),
        late_curfew=_clock(_setting("LATE_CURFEW", defaults.late_curfew)),
        earliest_start_hour=_setting("EARLIEST_START_HOUR", defaults.earliest_start_hour),
        latest_start_hour=_setting("LATEST_START_HOUR", defaults.latest_start_hour),
        allow_zero_front_gap=_setting("ALLOW_ZERO_FRONT_GAP", defaults.allow_zero_front_gap),
    )


def schedule_cache_timeout() -> int:
    return _setting("SCHEDULE_CACHE_TIMEOUT", DEFAULT_SCHEDULE_CACHE_TIMEOUT)
