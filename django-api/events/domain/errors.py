"""Domain error codes for the events module.

Validators return these errors as values; services raise them.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_PARTICIPANT_ID = "INVALID_PARTICIPANT_ID"
    EVENT_IS_PAST = "EVENT_IS_PAST"
    EVENT_DATE_NOT_IN_FUTURE = "EVENT_DATE_NOT_IN_FUTURE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_PERSONAL_CODE = "INVALID_PERSONAL_CODE"
    INVALID_PARTICIPANT_COUNT = "INVALID_PARTICIPANT_COUNT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class ParticipantNotFoundError(DomainError):
    """Raised when a participant is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PARTICIPANT_NOT_FOUND,
            message="Participant not found",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidParticipantIdError(DomainError):
    """Raised when a participant ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PARTICIPANT_ID,
            message="Invalid participant ID format",
        )


class EventIsPastError(DomainError):
    """Raised when a past event, or one of its participants, would be changed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_IS_PAST,
            message="Past events cannot be modified",
        )


class EventDateNotInFutureError(DomainError):
    """Raised when an event is scheduled at or before the current time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DATE_NOT_IN_FUTURE,
            message="Event date must be in the future",
        )


class MissingRequiredFieldError(DomainError):
    """Raised when a field required for the participant type is blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REQUIRED_FIELD,
            message=f"Field '{field}' is required",
        )


class InvalidPersonalCodeError(DomainError):
    """Raised when a personal code fails the format or checksum check."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PERSONAL_CODE,
            message="Invalid Estonian personal code",
        )


class InvalidParticipantCountError(DomainError):
    """Raised when a company's number of participants is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PARTICIPANT_COUNT,
            message="Number of participants must be a positive integer",
        )
