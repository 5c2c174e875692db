"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta

import pytest

from gigs.domain import (
    ActId,
    Capacity,
    Gig,
    GigId,
    GigStatus,
    Money,
    Performance,
    ScheduleEntry,
    SchedulingPolicy,
    TicketHolder,
    VenueId,
)
from gigs.domain.errors import (
    ErrorKind,
    GigAlreadyCancelledError,
    GigNotFoundError,
    LineupValidationError,
    PersistenceFailureError,
)
from gigs.domain.lineup import LineupRule, RuleViolation


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(40).amount == 40

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_str_format(self):
        """Money renders as a whole number."""
        assert str(Money(20000)) == "20000"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity accepts a positive value."""
        assert Capacity(15).value == 15

    def test_capacity_accepts_zero(self):
        """Capacity accepts zero."""
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity rejects a negative value."""
        with pytest.raises(ValueError):
            Capacity(-3)


class TestGigId:
    """Tests for GigId value object."""

    def test_from_string_valid_id(self):
        """GigId.from_string parses a positive integer."""
        assert GigId.from_string("40") == GigId(40)

    def test_from_string_rejects_garbage(self):
        """GigId.from_string rejects non-numeric text."""
        with pytest.raises(ValueError):
            GigId.from_string("forty")

    def test_from_string_rejects_non_positive(self):
        """GigId.from_string rejects zero."""
        with pytest.raises(ValueError):
            GigId.from_string("0")


class TestPerformance:
    """Tests for Performance domain model."""

    def test_end_is_start_plus_duration(self):
        """End is start plus duration."""
        performance = Performance(ActId(1), Money(100), datetime(2021, 11, 2, 19, 0), 70)
        assert performance.end == datetime(2021, 11, 2, 20, 10)

    def test_end_can_cross_midnight(self):
        """End rolls over to the next day."""
        performance = Performance(ActId(1), Money(100), datetime(2021, 11, 2, 23, 30), 45)
        assert performance.end == datetime(2021, 11, 3, 0, 15)

    def test_rejects_non_positive_duration(self):
        """Durations must be positive."""
        with pytest.raises(ValueError):
            Performance(ActId(1), Money(100), datetime(2021, 11, 2, 19, 0), 0)

    def test_shifted_moves_start_only(self):
        """shifted keeps act, fee and duration."""
        performance = Performance(ActId(1), Money(100), datetime(2021, 11, 2, 20, 25), 60)
        moved = performance.shifted(30)
        assert moved.start == datetime(2021, 11, 2, 19, 55)
        assert moved.duration_minutes == 60
        assert moved.fee == Money(100)


class TestScheduleEntry:
    """Tests for ScheduleEntry formatting."""

    def test_times_are_zero_padded_24_hour(self):
        """Times render as zero-padded 24-hour clock."""
        performance = Performance(ActId(1), Money(100), datetime(2021, 11, 2, 9, 5), 60)
        entry = ScheduleEntry.for_performance("QLS", performance)
        assert entry.as_row() == ("QLS", "09:05", "10:05")


class TestGig:
    """Tests for Gig domain model."""

    def test_cancelled_status_is_terminal_flag(self):
        """is_cancelled follows the status."""
        gig = Gig(GigId(1), VenueId(1), "Test", datetime(2021, 11, 2, 18), GigStatus.CANCELLED)
        assert gig.is_cancelled

    def test_status_codes_match_stored_values(self):
        """Status values are the stored one-letter codes."""
        assert GigStatus("G") is GigStatus.SCHEDULED
        assert GigStatus("C") is GigStatus.CANCELLED


class TestTicketHolder:
    """Tests for TicketHolder ordering."""

    def test_orders_by_name_then_email(self):
        """Holders sort by name, then email."""
        holders = [
            TicketHolder("J Smith", "js2@example.com"),
            TicketHolder("C Jones", "cj@example.com"),
            TicketHolder("J Smith", "js1@example.com"),
        ]
        assert [h.email for h in sorted(holders)] == [
            "cj@example.com",
            "js1@example.com",
            "js2@example.com",
        ]


class TestSchedulingPolicy:
    """Tests for SchedulingPolicy construction."""

    def test_defaults(self):
        """Defaults are the house scheduling rules."""
        policy = SchedulingPolicy()
        assert policy.min_interval == timedelta(minutes=10)
        assert policy.max_interval == timedelta(minutes=30)
        assert policy.early_curfew_genres == frozenset({"rock", "pop"})
        assert policy.allow_zero_front_gap is False

    def test_rejects_inverted_interval_bounds(self):
        """A minimum interval above the maximum is rejected."""
        with pytest.raises(ValueError):
            SchedulingPolicy(
                min_interval=timedelta(minutes=30), max_interval=timedelta(minutes=10)
            )

    def test_rejects_inverted_start_hours(self):
        """An earliest start hour after the latest is rejected."""
        with pytest.raises(ValueError):
            SchedulingPolicy(earliest_start_hour=20, latest_start_hour=9)


class TestDomainErrors:
    """Tests for the domain error taxonomy."""

    def test_kinds(self):
        """Each error code maps to its failure kind."""
        violation = RuleViolation(LineupRule.FIRST_ACT, "late start")
        assert GigNotFoundError(1).kind is ErrorKind.NOT_FOUND
        assert GigAlreadyCancelledError(1).kind is ErrorKind.ALREADY_TERMINAL
        assert LineupValidationError(violation).kind is ErrorKind.VALIDATION_FAILED
        assert PersistenceFailureError().kind is ErrorKind.PERSISTENCE_FAILURE

    def test_validation_error_carries_violation(self):
        """LineupValidationError exposes the violated rule."""
        violation = RuleViolation(LineupRule.FEE_CONSISTENCY, "fees differ")
        error = LineupValidationError(violation)
        assert error.violation is violation
        assert str(error) == "LINEUP_INVALID: fees differ"

    def test_persistence_failure_message_is_generic(self):
        """Storage failures never leak storage text."""
        assert "sql" not in PersistenceFailureError().message.lower()
