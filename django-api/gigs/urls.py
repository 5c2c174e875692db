from django.urls import path

from gigs.handlers import (
    ActCancellationView,
    GigCreateView,
    ScheduleView,
    TicketPurchaseView,
)

urlpatterns = [
    path("gigs", GigCreateView.as_view(), name="gig-create"),
    path("gigs/<str:gig_id>/schedule", ScheduleView.as_view(), name="gig-schedule"),
    path(
        "gigs/<str:gig_id>/cancellations",
        ActCancellationView.as_view(),
        name="gig-cancellations",
    ),
    path("gigs/<str:gig_id>/tickets", TicketPurchaseView.as_view(), name="gig-tickets"),
]
