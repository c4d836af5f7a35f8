"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, ParticipantId, ParticipantType, PaymentMethod


@dataclass(frozen=True)
class ParticipantData:
    """Type-normalized participant fields, ready to be stored.

    Fields belonging to the other participant type are always blank.
    """

    type: ParticipantType
    payment_method: PaymentMethod
    first_name: str = ""
    last_name: str = ""
    personal_code: str = ""
    company_name: str = ""
    registration_code: str = ""
    number_of_participants: int | None = None
    additional_info: str = ""


@dataclass(frozen=True)
class Participant:
    """Domain representation of a Participant."""

    id: ParticipantId
    event_id: EventId
    type: ParticipantType
    payment_method: PaymentMethod
    first_name: str
    last_name: str
    personal_code: str
    company_name: str
    registration_code: str
    number_of_participants: int | None
    additional_info: str
    created_at: datetime

    @property
    def display_name(self) -> str:
        if self.type is ParticipantType.INDIVIDUAL:
            return f"{self.first_name} {self.last_name}"
        return self.company_name

    @property
    def head_count(self) -> int:
        """People this registration brings: 1 for an individual."""
        if self.type is ParticipantType.INDIVIDUAL:
            return 1
        return self.number_of_participants or 0


@dataclass(frozen=True)
class EventData:
    """Editable event fields as submitted for create or update."""

    name: str
    location: str
    event_date: datetime
    additional_info: str = ""


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    location: str
    event_date: datetime
    additional_info: str
    created_at: datetime
    participants: tuple[Participant, ...] = ()

    @property
    def participant_count(self) -> int:
        return sum(p.head_count for p in self.participants)

    def is_past(self, now: datetime) -> bool:
        """An event at or before now is past and can no longer change."""
        return self.event_date <= now
