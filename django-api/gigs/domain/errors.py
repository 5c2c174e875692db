"""Domain error codes for the gigs module."""

from dataclasses import dataclass
from enum import Enum

from gigs.domain.lineup import RuleViolation


class ErrorKind(Enum):
    """Broad failure categories callers branch on."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    ALREADY_TERMINAL = "ALREADY_TERMINAL"
    CONFLICT = "CONFLICT"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


class ErrorCode(Enum):
    """Domain error codes."""

    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    ACT_NOT_FOUND = "ACT_NOT_FOUND"
    GIG_NOT_FOUND = "GIG_NOT_FOUND"
    ACT_NOT_IN_GIG = "ACT_NOT_IN_GIG"
    TICKET_PRICE_NOT_FOUND = "TICKET_PRICE_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_GIG_ID = "INVALID_GIG_ID"
    LINEUP_INVALID = "LINEUP_INVALID"
    GIG_ALREADY_CANCELLED = "GIG_ALREADY_CANCELLED"
    GIG_SOLD_OUT = "GIG_SOLD_OUT"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


_KINDS = {
    ErrorCode.VENUE_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.ACT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.GIG_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.ACT_NOT_IN_GIG: ErrorKind.NOT_FOUND,
    ErrorCode.TICKET_PRICE_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.INVALID_INPUT: ErrorKind.INVALID_INPUT,
    ErrorCode.INVALID_GIG_ID: ErrorKind.INVALID_INPUT,
    ErrorCode.LINEUP_INVALID: ErrorKind.VALIDATION_FAILED,
    ErrorCode.GIG_ALREADY_CANCELLED: ErrorKind.ALREADY_TERMINAL,
    ErrorCode.GIG_SOLD_OUT: ErrorKind.CONFLICT,
    ErrorCode.PERSISTENCE_FAILURE: ErrorKind.PERSISTENCE_FAILURE,
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self.code]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class VenueNotFoundError(DomainError):
    """Raised when a venue name does not resolve."""

    def __init__(self, venue_name: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        self.venue_name = venue_name


class ActNotFoundError(DomainError):
    """Raised when an act id or name does not resolve."""

    def __init__(self, act: object) -> None:
        super().__init__(
            code=ErrorCode.ACT_NOT_FOUND,
            message="Act not found",
        )
        self.act = act


class GigNotFoundError(DomainError):
    """Raised when a gig is not found."""

    def __init__(self, gig_id: int) -> None:
        super().__init__(
            code=ErrorCode.GIG_NOT_FOUND,
            message="Gig not found",
        )
        self.gig_id = gig_id


class ActNotInGigError(DomainError):
    """Raised when an act has no performances in the gig."""

    def __init__(self, gig_id: int, act_name: str) -> None:
        super().__init__(
            code=ErrorCode.ACT_NOT_IN_GIG,
            message="Act is not performing at this gig",
        )
        self.gig_id = gig_id
        self.act_name = act_name


class TicketPriceNotFoundError(DomainError):
    """Raised when a gig has no price for the requested ticket type."""

    def __init__(self, gig_id: int, price_type: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_PRICE_NOT_FOUND,
            message="No ticket price for this ticket type",
        )
        self.gig_id = gig_id
        self.price_type = price_type


class InvalidInputError(DomainError):
    """Raised when an argument is empty, negative or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class InvalidGigIdError(DomainError):
    """Raised when a gig ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_GIG_ID,
            message="Invalid gig ID format",
        )


class LineupValidationError(DomainError):
    """Raised when a lineup breaks a scheduling rule."""

    def __init__(self, violation: RuleViolation) -> None:
        super().__init__(code=ErrorCode.LINEUP_INVALID, message=violation.message)
        self.violation = violation


class GigAlreadyCancelledError(DomainError):
    """Raised when mutating a gig that is already cancelled."""

    def __init__(self, gig_id: int) -> None:
        super().__init__(
            code=ErrorCode.GIG_ALREADY_CANCELLED,
            message="Gig has already been cancelled",
        )
        self.gig_id = gig_id


class GigSoldOutError(DomainError):
    """Raised when a gig has no remaining venue capacity."""

    def __init__(self, gig_id: int) -> None:
        super().__init__(
            code=ErrorCode.GIG_SOLD_OUT,
            message="Gig is sold out",
        )
        self.gig_id = gig_id


class PersistenceFailureError(DomainError):
    """Raised when the underlying storage fails. Never carries storage text."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="The operation could not be completed",
        )
