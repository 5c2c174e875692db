"""Serializers for request parsing and for rendering domain models."""

from datetime import date, datetime, timedelta

from rest_framework import serializers

from gigs.domain import ADULT_PRICE_TYPE, ActId, Money, Performance

# Range of the integer columns amounts, durations and ids are stored in.
MAX_STORED_INT = 2147483647
MAX_NAME_LENGTH = 100


class PerformanceInputSerializer(serializers.Serializer):
    """One proposed slot in a new gig's lineup."""

    act_id = serializers.IntegerField(min_value=1, max_value=MAX_STORED_INT)
    fee = serializers.IntegerField(min_value=0, max_value=MAX_STORED_INT)
    start = serializers.DateTimeField()
    duration = serializers.IntegerField(min_value=1, max_value=MAX_STORED_INT)

    def validate(self, attrs: dict) -> dict:
        try:
            attrs["start"] + timedelta(minutes=attrs["duration"])
        except OverflowError:
            raise serializers.ValidationError(
                {"duration": "Performance would end outside the supported date range."}
            ) from None
        return attrs

    @staticmethod
    def to_performance(data: dict) -> Performance:
        return Performance(
            act_id=ActId(data["act_id"]),
            fee=Money(data["fee"]),
            start=data["start"],
            duration_minutes=data["duration"],
        )


class GigCreateSerializer(serializers.Serializer):
    """Request body for POST /api/gigs."""

    venue = serializers.CharField(max_length=MAX_NAME_LENGTH)
    title = serializers.CharField(
        allow_blank=True, trim_whitespace=False, max_length=MAX_NAME_LENGTH
    )
    start = serializers.DateTimeField()
    adult_price = serializers.IntegerField(max_value=MAX_STORED_INT)
    performances = PerformanceInputSerializer(many=True, allow_empty=True)

    def validate_start(self, value: datetime) -> datetime:
        if value.date() >= date.max:
            raise serializers.ValidationError("Gig start is outside the supported date range.")
        return value


class ActCancellationSerializer(serializers.Serializer):
    """Request body for POST /api/gigs/{gig_id}/cancellations."""

    act_name = serializers.CharField(max_length=MAX_NAME_LENGTH)


class TicketPurchaseSerializer(serializers.Serializer):
    """Request body for POST /api/gigs/{gig_id}/tickets."""

    name = serializers.CharField(allow_blank=True, max_length=MAX_NAME_LENGTH)
    email = serializers.CharField(allow_blank=True, max_length=MAX_NAME_LENGTH)
    price_type = serializers.CharField(max_length=2, default=ADULT_PRICE_TYPE)


class GigSerializer(serializers.Serializer):
    """Serializer for Gig domain model."""

    id = serializers.IntegerField(source="id.value")
    venue_id = serializers.IntegerField(source="venue_id.value")
    title = serializers.CharField()
    start = serializers.DateTimeField()
    status = serializers.CharField(source="status.name")


class ScheduleEntrySerializer(serializers.Serializer):
    """Serializer for ScheduleEntry domain model."""

    act_name = serializers.CharField()
    start = serializers.CharField()
    end = serializers.CharField()


class TicketHolderSerializer(serializers.Serializer):
    """Serializer for TicketHolder domain model."""

    name = serializers.CharField()
    email = serializers.CharField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField()
    gig_id = serializers.IntegerField(source="gig_id.value")
    customer_name = serializers.CharField()
    customer_email = serializers.CharField()
    price_type = serializers.CharField()
    cost = serializers.IntegerField(source="cost.amount")
