from gigs.handlers.views import (
    ActCancellationView,
    GigCreateView,
    ScheduleView,
    TicketPurchaseView,
)

__all__ = [
    "GigCreateView",
    "ScheduleView",
    "ActCancellationView",
    "TicketPurchaseView",
]
