from gigs.services.cancellation_service import CancellationService
from gigs.services.creation_service import GigCreationService
from gigs.services.schedule_service import ScheduleService
from gigs.services.ticket_service import TicketService

__all__ = [
    "GigCreationService",
    "CancellationService",
    "ScheduleService",
    "TicketService",
]
