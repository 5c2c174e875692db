"""Django ORM implementation of the GigStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta

from django.db import DatabaseError, transaction

from gigs import models
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

logger = logging.getLogger(__name__)


def _to_gig(row: models.Gig) -> Gig:
    return Gig(
        id=GigId(row.pk),
        venue_id=VenueId(row.venue_id),
        title=row.title,
        start=row.start,
        status=GigStatus(row.status),
    )


def _to_performance(row: models.Performance) -> Performance:
    return Performance(
        act_id=ActId(row.act_id),
        fee=Money(row.fee),
        start=row.start,
        duration_minutes=row.duration,
    )


class DjangoGigStore(GigStore):
    """Relational gig store using Django ORM."""

    @contextmanager
    def atomic(self) -> Iterator[None]:
        try:
            with transaction.atomic():
                yield
        except DatabaseError as exc:
            logger.debug("Transaction rolled back: %s", exc)
            raise PersistenceFailureError() from exc

    def find_venue_id_by_name(self, name: str) -> VenueId | None:
        pk = models.Venue.objects.filter(name=name).values_list("pk", flat=True).first()
        return VenueId(pk) if pk is not None else None

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        row = models.Venue.objects.filter(pk=venue_id.value).first()
        if row is None:
            return None
        return Venue(
            id=VenueId(row.pk),
            name=row.name,
            hire_cost=Money(row.hire_cost),
            capacity=Capacity(row.capacity),
        )

    def get_act(self, act_id: ActId) -> Act | None:
        row = models.Act.objects.filter(pk=act_id.value).first()
        if row is None:
            return None
        return Act(
            id=ActId(row.pk),
            name=row.name,
            genre=row.genre,
            standard_fee=Money(row.standard_fee),
        )

    def find_act_id_by_name(self, name: str) -> ActId | None:
        pk = models.Act.objects.filter(name=name).values_list("pk", flat=True).first()
        return ActId(pk) if pk is not None else None

    def get_gig(self, gig_id: GigId, *, for_update: bool = False) -> Gig | None:
        queryset = models.Gig.objects.filter(pk=gig_id.value)
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.first()
        return _to_gig(row) if row is not None else None

    def get_performances(self, gig_id: GigId) -> list[Performance]:
        rows = models.Performance.objects.filter(gig_id=gig_id.value).order_by("start", "pk")
        return [_to_performance(row) for row in rows]

    def get_schedule(self, gig_id: GigId) -> list[ScheduleEntry]:
        rows = (
            models.Performance.objects.filter(gig_id=gig_id.value)
            .select_related("act")
            .order_by("start", "pk")
        )
        return [ScheduleEntry.for_performance(row.act.name, _to_performance(row)) for row in rows]

    def insert_gig(self, venue_id: VenueId, title: str, start: datetime) -> GigId:
        row = models.Gig.objects.create(
            venue_id=venue_id.value,
            title=title,
            start=start,
            status=GigStatus.SCHEDULED.value,
        )
        return GigId(row.pk)

    def insert_performance(self, gig_id: GigId, performance: Performance) -> None:
        models.Performance.objects.create(
            gig_id=gig_id.value,
            act_id=performance.act_id.value,
            fee=performance.fee.amount,
            start=performance.start,
            duration=performance.duration_minutes,
        )

    def insert_ticket_price(self, gig_id: GigId, price_type: str, price: Money) -> None:
        models.TicketPrice.objects.create(
            gig_id=gig_id.value, price_type=price_type, price=price.amount
        )

    def delete_performances(self, gig_id: GigId, act_id: ActId) -> int:
        deleted, _ = models.Performance.objects.filter(
            gig_id=gig_id.value, act_id=act_id.value
        ).delete()
        return deleted

    def shift_performances_after(
        self, gig_id: GigId, threshold: datetime, minutes_earlier: int
    ) -> int:
        rows = list(
            models.Performance.objects.filter(gig_id=gig_id.value, start__gt=threshold)
        )
        offset = timedelta(minutes=minutes_earlier)
        for row in rows:
            row.start -= offset
        models.Performance.objects.bulk_update(rows, ["start"])
        return len(rows)

    def set_gig_status_cancelled(self, gig_id: GigId) -> None:
        row = models.Gig.objects.get(pk=gig_id.value)
        row.status = GigStatus.CANCELLED.value
        row.save(update_fields=["status"])

    def get_ticket_price(self, gig_id: GigId, price_type: str) -> Money | None:
        price = (
            models.TicketPrice.objects.filter(gig_id=gig_id.value, price_type=price_type)
            .values_list("price", flat=True)
            .first()
        )
        return Money(price) if price is not None else None

    def count_tickets(self, gig_id: GigId) -> int:
        return models.Ticket.objects.filter(gig_id=gig_id.value).count()

    def insert_ticket(
        self, gig_id: GigId, name: str, email: str, price_type: str, cost: Money
    ) -> Ticket:
        row = models.Ticket.objects.create(
            gig_id=gig_id.value,
            customer_name=name,
            customer_email=email,
            price_type=price_type,
            cost=cost.amount,
        )
        return Ticket(
            id=row.pk,
            gig_id=gig_id,
            customer_name=row.customer_name,
            customer_email=row.customer_email,
            price_type=row.price_type,
            cost=Money(row.cost),
        )

    def zero_ticket_costs(self, gig_id: GigId) -> int:
        return models.Ticket.objects.filter(gig_id=gig_id.value).update(cost=0)

    def distinct_ticket_holders(self, gig_id: GigId) -> list[TicketHolder]:
        pairs = (
            models.Ticket.objects.filter(gig_id=gig_id.value)
            .order_by("customer_name", "customer_email")
            .values_list("customer_name", "customer_email")
            .distinct()
        )
        return [TicketHolder(name=name, email=email) for name, email in pairs]
