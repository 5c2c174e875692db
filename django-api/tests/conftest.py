"""Pytest configuration and shared fixtures."""

import copy
import itertools
from contextlib import contextmanager
from datetime import datetime
from types import SimpleNamespace

import pytest
from rest_framework.test import APIClient

from gigs.domain import (
    Act,
    ActId,
    Capacity,
    Gig,
    GigId,
    GigStatus,
    Money,
    Performance,
    ScheduleEntry,
    Ticket,
    TicketHolder,
    Venue,
    VenueId,
)
from gigs.domain.errors import PersistenceFailureError
from gigs.stores.interfaces import GigStore


class InMemoryGigStore(GigStore):
    """Dict-backed GigStore whose atomic() restores a snapshot on failure."""

    def __init__(self) -> None:
        self.venues: dict[int, Venue] = {}
        self.acts: dict[int, Act] = {}
        self.gigs: dict[int, Gig] = {}
        self.performances: dict[int, list[Performance]] = {}
        self.prices: dict[tuple[int, str], Money] = {}
        self.tickets: list[Ticket] = []
        self.fail_on: str | None = None
        self._ids = itertools.count(1)

    # Seeding helpers

    def add_venue(self, name: str, capacity: int = 100, hire_cost: int = 1000) -> Venue:
        venue = Venue(VenueId(next(self._ids)), name, Money(hire_cost), Capacity(capacity))
        self.venues[venue.id.value] = venue
        return venue

    def add_act(self, name: str, genre: str = "Music", fee: int = 1000) -> Act:
        act = Act(ActId(next(self._ids)), name, genre, Money(fee))
        self.acts[act.id.value] = act
        return act

    def add_gig(
        self,
        venue: Venue,
        start: datetime,
        performances: list[Performance],
        status: GigStatus = GigStatus.SCHEDULED,
        adult_price: int = 40,
    ) -> Gig:
        gig_id = self.insert_gig(venue.id, "Test gig", start)
        for performance in performances:
            self.insert_performance(gig_id, performance)
        self.insert_ticket_price(gig_id, "A", Money(adult_price))
        if status is GigStatus.CANCELLED:
            self.set_gig_status_cancelled(gig_id)
        return self.gigs[gig_id.value]

    def add_ticket(self, gig: Gig, name: str, email: str, cost: int = 40) -> Ticket:
        return self.insert_ticket(gig.id, name, email, "A", Money(cost))

    def _maybe_fail(self, operation: str) -> None:
        if self.fail_on == operation:
            raise PersistenceFailureError()

    # GigStore

    @contextmanager
    def atomic(self):
        snapshot = copy.deepcopy((self.gigs, self.performances, self.prices, self.tickets))
        try:
            yield
        except BaseException:
            self.gigs, self.performances, self.prices, self.tickets = snapshot
            raise

    def find_venue_id_by_name(self, name):
        return next((v.id for v in self.venues.values() if v.name == name), None)

    def get_venue(self, venue_id):
        return self.venues.get(venue_id.value)

    def get_act(self, act_id):
        return self.acts.get(act_id.value)

    def find_act_id_by_name(self, name):
        return next((a.id for a in self.acts.values() if a.name == name), None)

    def get_gig(self, gig_id, *, for_update=False):
        return self.gigs.get(gig_id.value)

    def get_performances(self, gig_id):
        return sorted(self.performances.get(gig_id.value, []), key=lambda p: p.start)

    def get_schedule(self, gig_id):
        return [
            ScheduleEntry.for_performance(self.acts[p.act_id.value].name, p)
            for p in self.get_performances(gig_id)
        ]

    def insert_gig(self, venue_id, title, start):
        self._maybe_fail("insert_gig")
        gig = Gig(GigId(next(self._ids)), venue_id, title, start, GigStatus.SCHEDULED)
        self.gigs[gig.id.value] = gig
        self.performances[gig.id.value] = []
        return gig.id

    def insert_performance(self, gig_id, performance):
        self._maybe_fail("insert_performance")
        self.performances[gig_id.value].append(performance)

    def insert_ticket_price(self, gig_id, price_type, price):
        self._maybe_fail("insert_ticket_price")
        self.prices[(gig_id.value, price_type)] = price

    def delete_performances(self, gig_id, act_id):
        before = self.performances[gig_id.value]
        kept = [p for p in before if p.act_id != act_id]
        self.performances[gig_id.value] = kept
        return len(before) - len(kept)

    def shift_performances_after(self, gig_id, threshold, minutes_earlier):
        self._maybe_fail("shift_performances_after")
        moved = 0
        shifted = []
        for performance in self.performances[gig_id.value]:
            if performance.start > threshold:
                performance = performance.shifted(minutes_earlier)
                moved += 1
            shifted.append(performance)
        self.performances[gig_id.value] = shifted
        return moved

    def set_gig_status_cancelled(self, gig_id):
        self._maybe_fail("set_gig_status_cancelled")
        gig = self.gigs[gig_id.value]
        self.gigs[gig_id.value] = Gig(gig.id, gig.venue_id, gig.title, gig.start, GigStatus.CANCELLED)

    def get_ticket_price(self, gig_id, price_type):
        return self.prices.get((gig_id.value, price_type))

    def count_tickets(self, gig_id):
        return sum(1 for t in self.tickets if t.gig_id == gig_id)

    def insert_ticket(self, gig_id, name, email, price_type, cost):
        self._maybe_fail("insert_ticket")
        ticket = Ticket(len(self.tickets) + 1, gig_id, name, email, price_type, cost)
        self.tickets.append(ticket)
        return ticket

    def zero_ticket_costs(self, gig_id):
        updated = 0
        for index, ticket in enumerate(self.tickets):
            if ticket.gig_id == gig_id:
                self.tickets[index] = Ticket(
                    ticket.id, ticket.gig_id, ticket.customer_name,
                    ticket.customer_email, ticket.price_type, Money(0),
                )
                updated += 1
        return updated

    def distinct_ticket_holders(self, gig_id):
        holders = {
            TicketHolder(t.customer_name, t.customer_email)
            for t in self.tickets
            if t.gig_id == gig_id
        }
        return sorted(holders)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryGigStore:
    return InMemoryGigStore()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def orm_catalog(db):
    """Venue and acts persisted through the ORM."""
    from gigs import models

    return SimpleNamespace(
        venue=models.Venue.objects.create(name="Big Hall", hire_cost=5000, capacity=3),
        viewbee=models.Act.objects.create(name="ViewBee 40", genre="Music", standard_fee=20000),
        where=models.Act.objects.create(name="The Where", genre="Music", standard_fee=30000),
        selecter=models.Act.objects.create(name="The Selecter", genre="Music", standard_fee=10000),
        swift=models.Act.objects.create(name="Scalar Swift", genre="rock", standard_fee=15000),
    )


@pytest.fixture
def orm_gig(orm_catalog):
    """ViewBee 40 18:00-18:50, The Where 19:00-20:10, The Selecter 20:25-21:25."""
    from gigs import models

    gig = models.Gig.objects.create(
        venue=orm_catalog.venue, title="Test title", start=datetime(2021, 11, 2, 18, 0)
    )
    for act, hour, minute, duration in [
        (orm_catalog.viewbee, 18, 0, 50),
        (orm_catalog.where, 19, 0, 70),
        (orm_catalog.selecter, 20, 25, 60),
    ]:
        models.Performance.objects.create(
            gig=gig,
            act=act,
            fee=act.standard_fee,
            start=datetime(2021, 11, 2, hour, minute),
            duration=duration,
        )
    models.TicketPrice.objects.create(gig=gig, price_type="A", price=40)
    return gig
