"""Lineup rules.

Pure functions over a gig's performances. Every check returns a
RuleViolation describing the first problem it finds, or None; nothing here
raises or touches storage. Callers decide what a violation means.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from gigs.domain.models import Performance, format_clock
from gigs.domain.policy import DEFAULT_POLICY, SchedulingPolicy
from gigs.domain.value_objects import ActId, Money


class LineupRule(Enum):
    """Scheduling rules a lineup must satisfy."""

    START_WINDOW = "start_window"
    FIRST_ACT = "first_act"
    ACT_INTERVAL = "act_interval"
    MINIMUM_LENGTH = "minimum_length"
    FINISH_TIME = "finish_time"
    FEE_CONSISTENCY = "fee_consistency"


@dataclass(frozen=True)
class RuleViolation:
    """A broken rule and a user-safe explanation."""

    rule: LineupRule
    message: str


def _minutes(delta: timedelta) -> int:
    return int(delta.total_seconds() // 60)


def sort_lineup(performances: Iterable[Performance]) -> tuple[Performance, ...]:
    """Return performances in running order (start time ascending)."""
    return tuple(sorted(performances, key=lambda p: p.start))


def lineup_end(lineup: Sequence[Performance]) -> datetime:
    return max(p.end for p in lineup)


def _within_interval(gap: timedelta, policy: SchedulingPolicy) -> bool:
    return policy.min_interval <= gap <= policy.max_interval


def check_start_window(
    gig_start: datetime, policy: SchedulingPolicy = DEFAULT_POLICY
) -> RuleViolation | None:
    if policy.earliest_start_hour <= gig_start.hour <= policy.latest_start_hour:
        return None
    return RuleViolation(
        LineupRule.START_WINDOW,
        f"Gigs must start between {policy.earliest_start_hour:02d}:00 "
        f"and {policy.latest_start_hour:02d}:59",
    )


def check_first_act(
    lineup: Sequence[Performance], gig_start: datetime
) -> RuleViolation | None:
    if not lineup:
        return RuleViolation(LineupRule.FIRST_ACT, "Lineup has no performances")
    first = min(lineup, key=lambda p: p.start)
    if first.start != gig_start:
        return RuleViolation(
            LineupRule.FIRST_ACT,
            f"First act starts at {format_clock(first.start)} "
            f"but the gig starts at {format_clock(gig_start)}",
        )
    return None


def check_intervals(
    lineup: Sequence[Performance], policy: SchedulingPolicy = DEFAULT_POLICY
) -> RuleViolation | None:
    """Check the gap between each act finishing and the next one starting."""
    by_end = sorted(lineup, key=lambda p: (p.end, p.start))
    for before, after in zip(by_end, by_end[1:]):
        gap = after.start - before.end
        if not _within_interval(gap, policy):
            return RuleViolation(
                LineupRule.ACT_INTERVAL,
                f"Interval of {_minutes(gap)} minutes between "
                f"{format_clock(before.end)} and {format_clock(after.start)} "
                f"must be between {_minutes(policy.min_interval)} and "
                f"{_minutes(policy.max_interval)} minutes",
            )
    return None


def check_minimum_length(
    lineup: Sequence[Performance],
    gig_start: datetime,
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> RuleViolation | None:
    if lineup and lineup_end(lineup) >= gig_start + policy.min_gig_length:
        return None
    return RuleViolation(
        LineupRule.MINIMUM_LENGTH,
        f"Gig must run for at least {_minutes(policy.min_gig_length)} minutes",
    )


def finish_ceiling(
    gig_start: datetime,
    genres: Iterable[str],
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> datetime:
    """Latest moment the last act may finish, given the genres on the bill."""
    day = gig_start.date()
    if any(genre in policy.early_curfew_genres for genre in genres):
        return datetime.combine(day, policy.early_curfew)
    return datetime.combine(day + timedelta(days=1), policy.late_curfew)


def check_finish_time(
    lineup: Sequence[Performance],
    gig_start: datetime,
    genres: Iterable[str],
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> RuleViolation | None:
    if not lineup:
        return None
    ceiling = finish_ceiling(gig_start, genres, policy)
    finish = lineup_end(lineup)
    if finish > ceiling:
        shown = format_clock(finish)
        if finish.date() != ceiling.date():
            shown = f"{finish:%Y-%m-%d} {shown}"
        return RuleViolation(
            LineupRule.FINISH_TIME,
            f"Last act finishes at {shown}, "
            f"after the {format_clock(ceiling)} curfew",
        )
    return None


def check_fee_consistency(lineup: Sequence[Performance]) -> RuleViolation | None:
    agreed: dict[ActId, Money] = {}
    for performance in lineup:
        fee = agreed.setdefault(performance.act_id, performance.fee)
        if fee != performance.fee:
            return RuleViolation(
                LineupRule.FEE_CONSISTENCY,
                f"Act {performance.act_id.value} is booked with fees "
                f"{fee} and {performance.fee}",
            )
    return None


def validate_lineup(
    lineup: Sequence[Performance],
    gig_start: datetime,
    genres: Iterable[str],
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> list[RuleViolation]:
    """Evaluate every rule and return all violations, in checking order."""
    return list(_violations(lineup, gig_start, genres, policy))


def first_violation(
    lineup: Sequence[Performance],
    gig_start: datetime,
    genres: Iterable[str],
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> RuleViolation | None:
    """Return the first broken rule in checking order, evaluating no further."""
    return next(_violations(lineup, gig_start, genres, policy), None)


def _violations(
    lineup: Sequence[Performance],
    gig_start: datetime,
    genres: Iterable[str],
    policy: SchedulingPolicy,
) -> Iterator[RuleViolation]:
    genres = tuple(genres)
    checks = (
        lambda: check_start_window(gig_start, policy),
        lambda: check_first_act(lineup, gig_start),
        lambda: check_minimum_length(lineup, gig_start, policy),
        lambda: check_finish_time(lineup, gig_start, genres, policy),
        lambda: check_fee_consistency(lineup),
        lambda: check_intervals(lineup, policy),
    )
    for check in checks:
        violation = check()
        if violation is not None:
            yield violation


def lineup_after_removal(
    lineup: Iterable[Performance], act_id: ActId
) -> tuple[Performance, ...]:
    """Drop an act and pull later performances earlier by its total stage time.

    Only performances starting strictly after the act's last finish move.
    """
    lineup = tuple(lineup)
    removed = [p for p in lineup if p.act_id == act_id]
    if not removed:
        return sort_lineup(lineup)
    threshold = max(p.end for p in removed)
    minutes = sum(p.duration_minutes for p in removed)
    return sort_lineup(
        p.shifted(minutes) if p.start > threshold else p
        for p in lineup
        if p.act_id != act_id
    )


def would_violate_after_removal(
    lineup: Sequence[Performance],
    act_id: ActId,
    gig_start: datetime,
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> RuleViolation | None:
    """Check intervals and minimum length of the lineup left after removing an act.

    The first act and curfew rules are not re-checked.
    """
    ordered = sort_lineup(lineup)
    remaining = lineup_after_removal(ordered, act_id)
    if not remaining:
        return RuleViolation(LineupRule.MINIMUM_LENGTH, "No performances would remain")

    if ordered and ordered[0].act_id == act_id:
        front_gap = remaining[0].start - gig_start
        zero_allowed = policy.allow_zero_front_gap and front_gap == timedelta(0)
        if not zero_allowed and not _within_interval(front_gap, policy):
            return RuleViolation(
                LineupRule.ACT_INTERVAL,
                f"Removing the opening act leaves a {_minutes(front_gap)} minute "
                f"gap before {format_clock(remaining[0].start)}",
            )

    return check_intervals(remaining, policy) or check_minimum_length(
        remaining, gig_start, policy
    )
