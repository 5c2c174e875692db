"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Constraints here are the last line of defence; the lineup rules are
checked before anything is written.
"""

from django.db import models

from gigs.domain import ADULT_PRICE_TYPE, GigStatus


class Venue(models.Model):
    """Persistence model for venues."""

    name = models.CharField(max_length=100, unique=True)
    hire_cost = models.PositiveIntegerField()
    capacity = models.PositiveIntegerField()

    class Meta:
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gt=0), name="venue_capacity_positive"
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Act(models.Model):
    """Persistence model for acts."""

    name = models.CharField(max_length=100, unique=True)
    genre = models.CharField(max_length=50)
    standard_fee = models.PositiveIntegerField()

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Gig(models.Model):
    """Persistence model for gigs."""

    STATUS_CHOICES = [
        (GigStatus.SCHEDULED.value, "Scheduled"),
        (GigStatus.CANCELLED.value, "Cancelled"),
    ]

    venue = models.ForeignKey(Venue, on_delete=models.PROTECT, related_name="gigs")
    title = models.CharField(max_length=100)
    start = models.DateTimeField()
    status = models.CharField(
        max_length=1, choices=STATUS_CHOICES, default=GigStatus.SCHEDULED.value
    )

    class Meta:
        ordering = ["start"]
        indexes = [
            models.Index(fields=["venue", "start"], name="gig_venue_start_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    status__in=[GigStatus.SCHEDULED.value, GigStatus.CANCELLED.value]
                ),
                name="gig_status_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.title} @ {self.venue.name} ({self.start:%Y-%m-%d %H:%M})"


class Performance(models.Model):
    """Persistence model for an act's slot in a gig."""

    act = models.ForeignKey(Act, on_delete=models.PROTECT, related_name="performances")
    gig = models.ForeignKey(Gig, on_delete=models.CASCADE, related_name="performances")
    fee = models.PositiveIntegerField()
    start = models.DateTimeField()
    duration = models.PositiveIntegerField(help_text="Minutes on stage")

    class Meta:
        ordering = ["start"]
        indexes = [
            models.Index(fields=["gig", "start"], name="performance_gig_start_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["act", "gig", "start"], name="performance_unique_slot"
            ),
            models.CheckConstraint(
                condition=models.Q(duration__gt=0), name="performance_duration_positive"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.act.name} - {self.start:%H:%M}"


class TicketPrice(models.Model):
    """Persistence model for a gig's price per ticket type."""

    gig = models.ForeignKey(Gig, on_delete=models.CASCADE, related_name="prices")
    price_type = models.CharField(max_length=2, default=ADULT_PRICE_TYPE)
    price = models.PositiveIntegerField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["gig", "price_type"], name="ticket_price_unique_type"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.price_type} - {self.price}"


class Ticket(models.Model):
    """Persistence model for sold tickets."""

    gig = models.ForeignKey(Gig, on_delete=models.PROTECT, related_name="tickets")
    customer_name = models.CharField(max_length=100)
    customer_email = models.CharField(max_length=100)
    price_type = models.CharField(max_length=2)
    cost = models.PositiveIntegerField()

    def __str__(self) -> str:
        return f"{self.customer_name} - {self.gig_id}"
