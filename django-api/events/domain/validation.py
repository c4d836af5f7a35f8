"""Business rules for events and participant registrations.

Validators are pure: they take the evaluation instant as an argument and
return a DomainError instead of raising it. The first failing rule wins.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from events.domain.errors import (
    DomainError,
    EventDateNotInFutureError,
    EventIsPastError,
    EventNotFoundError,
    InvalidParticipantCountError,
    InvalidPersonalCodeError,
    MissingRequiredFieldError,
)
from events.domain.models import Event, ParticipantData
from events.domain.value_objects import (
    EventId,
    HeadCount,
    ParticipantType,
    PaymentMethod,
    PersonalCode,
)

EventLookup = Callable[[EventId], Event | None]


@dataclass(frozen=True)
class ParticipantDraft:
    """Raw participant fields as submitted, before type normalization."""

    event_id: EventId
    type: ParticipantType
    payment_method: PaymentMethod
    first_name: str | None = None
    last_name: str | None = None
    personal_code: str | None = None
    company_name: str | None = None
    registration_code: str | None = None
    number_of_participants: str | int | None = None
    additional_info: str | None = None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_event_open(event: Event | None, now: datetime) -> DomainError | None:
    """Return the reason an event cannot change, or None if it still can."""
    if event is None:
        return EventNotFoundError()
    if event.is_past(now):
        return EventIsPastError()
    return None


def check_event_date(event_date: datetime, now: datetime) -> DomainError | None:
    if event_date <= now:
        return EventDateNotInFutureError()
    return None


def _validate_individual(draft: ParticipantDraft) -> ParticipantData | DomainError:
    for field in ("first_name", "last_name", "personal_code"):
        if _is_blank(getattr(draft, field)):
            return MissingRequiredFieldError(field)
    try:
        personal_code = PersonalCode(draft.personal_code)
    except ValueError:
        return InvalidPersonalCodeError()

    return ParticipantData(
        type=ParticipantType.INDIVIDUAL,
        payment_method=draft.payment_method,
        first_name=draft.first_name,
        last_name=draft.last_name,
        personal_code=personal_code.value,
        additional_info=draft.additional_info or "",
    )


def _validate_company(draft: ParticipantDraft) -> ParticipantData | DomainError:
    for field in ("company_name", "registration_code"):
        if _is_blank(getattr(draft, field)):
            return MissingRequiredFieldError(field)
    try:
        head_count = HeadCount.parse(draft.number_of_participants)
    except ValueError:
        return InvalidParticipantCountError()

    return ParticipantData(
        type=ParticipantType.COMPANY,
        payment_method=draft.payment_method,
        company_name=draft.company_name,
        registration_code=draft.registration_code,
        number_of_participants=head_count.value,
        additional_info=draft.additional_info or "",
    )


def validate_participant(
    draft: ParticipantDraft,
    find_event: EventLookup,
    now: datetime,
) -> ParticipantData | DomainError:
    """Validate a registration against its event and normalize its fields.

    Rules, in order:
        1. The event exists (EVENT_NOT_FOUND).
        2. The event is still in the future (EVENT_IS_PAST).
        3. Individuals need first name, last name and personal code
           (MISSING_REQUIRED_FIELD), and the code must pass the checksum
           (INVALID_PERSONAL_CODE).
        4. Companies need company name and registration code
           (MISSING_REQUIRED_FIELD) and a positive number of participants
           (INVALID_PARTICIPANT_COUNT).

    Returns:
        ParticipantData with the other type's fields blanked, or the
        DomainError for the first rule that failed.
    """
    error = check_event_open(find_event(draft.event_id), now)
    if error is not None:
        return error

    if draft.type is ParticipantType.INDIVIDUAL:
        return _validate_individual(draft)
    return _validate_company(draft)
