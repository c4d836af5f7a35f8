"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from rest_framework.test import APIClient

from events.domain import (
    Event,
    EventData,
    EventId,
    Participant,
    ParticipantData,
    ParticipantId,
)
from events.stores.interfaces import EventStore

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)
VALID_PERSONAL_CODE = "37605030299"


class InMemoryEventStore(EventStore):
    """Dict-backed store for exercising services without a database."""

    def __init__(self) -> None:
        self._events: dict[int, Event] = {}
        self._participants: dict[int, Participant] = {}
        self._event_ids = count(1)
        self._participant_ids = count(1)

    def _with_participants(self, event: Event) -> Event:
        return replace(event, participants=tuple(self.list_participants(event.id)))

    def list_events(self) -> list[Event]:
        return [self._with_participants(e) for _, e in sorted(self._events.items())]

    def get_event(self, event_id: EventId) -> Event | None:
        event = self._events.get(event_id.value)
        return self._with_participants(event) if event is not None else None

    def create_event(self, data: EventData) -> Event:
        event = Event(
            id=EventId(next(self._event_ids)),
            name=data.name,
            location=data.location,
            event_date=data.event_date,
            additional_info=data.additional_info,
            created_at=NOW,
        )
        self._events[event.id.value] = event
        return event

    def update_event(self, event_id: EventId, data: EventData) -> Event:
        event = replace(
            self._events[event_id.value],
            name=data.name,
            location=data.location,
            event_date=data.event_date,
            additional_info=data.additional_info,
        )
        self._events[event_id.value] = event
        return self._with_participants(event)

    def delete_event(self, event_id: EventId) -> None:
        self._events.pop(event_id.value, None)
        for participant in self.list_participants(event_id):
            del self._participants[participant.id.value]

    def event_exists(self, event_id: EventId) -> bool:
        return event_id.value in self._events

    def list_participants(self, event_id: EventId) -> list[Participant]:
        return [
            p for _, p in sorted(self._participants.items()) if p.event_id == event_id
        ]

    def get_participant(self, participant_id: ParticipantId) -> Participant | None:
        return self._participants.get(participant_id.value)

    def _build(self, pid: ParticipantId, event_id: EventId, data: ParticipantData) -> Participant:
        return Participant(
            id=pid,
            event_id=event_id,
            type=data.type,
            payment_method=data.payment_method,
            first_name=data.first_name,
            last_name=data.last_name,
            personal_code=data.personal_code,
            company_name=data.company_name,
            registration_code=data.registration_code,
            number_of_participants=data.number_of_participants,
            additional_info=data.additional_info,
            created_at=NOW,
        )

    def add_participant(self, event_id: EventId, data: ParticipantData) -> Participant:
        participant = self._build(ParticipantId(next(self._participant_ids)), event_id, data)
        self._participants[participant.id.value] = participant
        return participant

    def update_participant(
        self, participant_id: ParticipantId, data: ParticipantData
    ) -> Participant:
        existing = self._participants[participant_id.value]
        participant = self._build(participant_id, existing.event_id, data)
        self._participants[participant_id.value] = participant
        return participant

    def delete_participant(self, participant_id: ParticipantId) -> None:
        self._participants.pop(participant_id.value, None)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def upcoming_event(store: InMemoryEventStore) -> Event:
    return store.create_event(
        EventData(name="Tech Summit", location="Tallinn", event_date=NOW + timedelta(days=7))
    )


@pytest.fixture
def past_event(store: InMemoryEventStore) -> Event:
    # Written straight into the store: services refuse past dates.
    return store.create_event(
        EventData(name="Last Year", location="Tartu", event_date=NOW - timedelta(days=1))
    )
