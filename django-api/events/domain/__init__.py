from events.domain.models import Event, EventData, Participant, ParticipantData
from events.domain.value_objects import (
    EventId,
    HeadCount,
    ParticipantId,
    ParticipantType,
    PaymentMethod,
    PersonalCode,
)

__all__ = [
    "Event",
    "EventData",
    "Participant",
    "ParticipantData",
    "EventId",
    "ParticipantId",
    "ParticipantType",
    "PaymentMethod",
    "PersonalCode",
    "HeadCount",
]
