"""Django ORM implementation of the EventStore."""

from events import models as orm
from events.domain import (
    Event,
    EventData,
    EventId,
    Participant,
    ParticipantData,
    ParticipantId,
    ParticipantType,
    PaymentMethod,
)
from events.stores.interfaces import EventStore


def _to_participant(row: orm.Participant) -> Participant:
    return Participant(
        id=ParticipantId(row.pk),
        event_id=EventId(row.event_id),
        type=ParticipantType(row.type),
        payment_method=PaymentMethod(row.payment_method),
        first_name=row.first_name,
        last_name=row.last_name,
        personal_code=row.personal_code,
        company_name=row.company_name,
        registration_code=row.registration_code,
        number_of_participants=row.number_of_participants,
        additional_info=row.additional_info,
        created_at=row.created_at,
    )


def _to_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        name=row.name,
        location=row.location,
        event_date=row.event_date,
        additional_info=row.additional_info,
        created_at=row.created_at,
        participants=tuple(_to_participant(p) for p in row.participants.all()),
    )


def _apply_participant_data(row: orm.Participant, data: ParticipantData) -> None:
    row.type = data.type.value
    row.payment_method = data.payment_method.value
    row.first_name = data.first_name
    row.last_name = data.last_name
    row.personal_code = data.personal_code
    row.company_name = data.company_name
    row.registration_code = data.registration_code
    row.number_of_participants = data.number_of_participants
    row.additional_info = data.additional_info


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _events(self):
        return orm.Event.objects.prefetch_related("participants")

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in self._events().order_by("id")]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._events().filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def create_event(self, data: EventData) -> Event:
        row = orm.Event.objects.create(
            name=data.name,
            location=data.location,
            event_date=data.event_date,
            additional_info=data.additional_info,
        )
        return _to_event(row)

    def update_event(self, event_id: EventId, data: EventData) -> Event:
        orm.Event.objects.filter(pk=event_id.value).update(
            name=data.name,
            location=data.location,
            event_date=data.event_date,
            additional_info=data.additional_info,
        )
        return _to_event(self._events().get(pk=event_id.value))

    def delete_event(self, event_id: EventId) -> None:
        orm.Event.objects.filter(pk=event_id.value).delete()

    def event_exists(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(pk=event_id.value).exists()

    def list_participants(self, event_id: EventId) -> list[Participant]:
        rows = orm.Participant.objects.filter(event_id=event_id.value).order_by("id")
        return [_to_participant(row) for row in rows]

    def get_participant(self, participant_id: ParticipantId) -> Participant | None:
        row = orm.Participant.objects.filter(pk=participant_id.value).first()
        return _to_participant(row) if row is not None else None

    def add_participant(self, event_id: EventId, data: ParticipantData) -> Participant:
        row = orm.Participant(event_id=event_id.value)
        _apply_participant_data(row, data)
        row.save()
        return _to_participant(row)

    def update_participant(
        self, participant_id: ParticipantId, data: ParticipantData
    ) -> Participant:
        row = orm.Participant.objects.get(pk=participant_id.value)
        _apply_participant_data(row, data)
        row.save()
        return _to_participant(row)

    def delete_participant(self, participant_id: ParticipantId) -> None:
        orm.Participant.objects.filter(pk=participant_id.value).delete()
