"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from gigs.cache import schedule_key
from gigs.conf import schedule_cache_timeout, scheduling_policy
from gigs.domain import GigCancelled, GigId
from gigs.domain.errors import (
    DomainError,
    ErrorCode,
    ErrorKind,
    InvalidGigIdError,
    LineupValidationError,
)
from gigs.handlers.serializers import (
    MAX_STORED_INT,
    ActCancellationSerializer,
    GigCreateSerializer,
    GigSerializer,
    PerformanceInputSerializer,
    ScheduleEntrySerializer,
    TicketHolderSerializer,
    TicketPurchaseSerializer,
    TicketSerializer,
)
from gigs.services import (
    CancellationService,
    GigCreationService,
    ScheduleService,
    TicketService,
)
from gigs.stores.django_store import DjangoGigStore

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_TERMINAL: status.HTTP_409_CONFLICT,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, LineupValidationError):
        body["rule"] = error.violation.rule.value
    return Response({"error": body}, status=_STATUS_BY_KIND[error.kind])


def _malformed(errors: dict) -> Response:
    body = {
        "code": ErrorCode.INVALID_INPUT.value,
        "message": "Malformed request",
        "fields": errors,
    }
    return Response({"error": body}, status=status.HTTP_400_BAD_REQUEST)


def _parse_gig_id(gig_id: str) -> int:
    try:
        parsed = GigId.from_string(gig_id).value
    except ValueError:
        raise InvalidGigIdError() from None
    if parsed > MAX_STORED_INT:
        raise InvalidGigIdError()
    return parsed


class GigCreateView(APIView):
    """Handler for POST /api/gigs"""

    def post(self, request: Request) -> Response:
        serializer = GigCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return _malformed(serializer.errors)
        data = serializer.validated_data
        service = GigCreationService(DjangoGigStore(), scheduling_policy())
        try:
            gig = service.create_gig(
                venue_name=data["venue"],
                title=data["title"],
                start=data["start"],
                adult_price=data["adult_price"],
                performances=[
                    PerformanceInputSerializer.to_performance(item)
                    for item in data["performances"]
                ],
            )
        except DomainError as error:
            return _error_response(error)
        return Response(GigSerializer(gig).data, status=status.HTTP_201_CREATED)


class ScheduleView(APIView):
    """Handler for GET /api/gigs/{gig_id}/schedule"""

    def get(self, request: Request, gig_id: str) -> Response:
        try:
            gid = _parse_gig_id(gig_id)
            key = schedule_key(gid)
            data = cache.get(key)
            if data is None:
                schedule = ScheduleService(DjangoGigStore()).get_schedule(gid)
                data = list(ScheduleEntrySerializer(schedule, many=True).data)
                cache.set(key, data, schedule_cache_timeout())
        except DomainError as error:
            return _error_response(error)
        return Response(data)


class ActCancellationView(APIView):
    """Handler for POST /api/gigs/{gig_id}/cancellations"""

    def post(self, request: Request, gig_id: str) -> Response:
        serializer = ActCancellationSerializer(data=request.data)
        if not serializer.is_valid():
            return _malformed(serializer.errors)
        service = CancellationService(DjangoGigStore(), scheduling_policy())
        try:
            outcome = service.cancel_act(
                _parse_gig_id(gig_id), serializer.validated_data["act_name"]
            )
        except DomainError as error:
            return _error_response(error)

        if isinstance(outcome, GigCancelled):
            return Response(
                {
                    "outcome": "gig_cancelled",
                    "affected_customers": TicketHolderSerializer(
                        outcome.affected_customers, many=True
                    ).data,
                }
            )
        return Response(
            {
                "outcome": "act_removed",
                "lineup": ScheduleEntrySerializer(outcome.remaining_lineup, many=True).data,
            }
        )


class TicketPurchaseView(APIView):
    """Handler for POST /api/gigs/{gig_id}/tickets"""

    def post(self, request: Request, gig_id: str) -> Response:
        serializer = TicketPurchaseSerializer(data=request.data)
        if not serializer.is_valid():
            return _malformed(serializer.errors)
        data = serializer.validated_data
        try:
            ticket = TicketService(DjangoGigStore()).purchase_ticket(
                _parse_gig_id(gig_id), data["name"], data["email"], data["price_type"]
            )
        except DomainError as error:
            return _error_response(error)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)
