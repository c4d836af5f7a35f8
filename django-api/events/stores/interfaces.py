"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventData, EventId, Participant, ParticipantData, ParticipantId


class EventStore(ABC):
    """Interface for event and participant persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events with their participants, ordered by id ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its participants, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, data: EventData) -> Event:
        """Persist a new event and return it with its assigned id."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, data: EventData) -> Event:
        """Overwrite the editable fields of an existing event."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete an event and, by cascade, its participants."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def list_participants(self, event_id: EventId) -> list[Participant]:
        """Return the participants of an event, ordered by id ascending."""
        ...

    @abstractmethod
    def get_participant(self, participant_id: ParticipantId) -> Participant | None:
        """Return a participant by ID, or None if not found."""
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, data: ParticipantData) -> Participant:
        """Register a new participant under an event."""
        ...

    @abstractmethod
    def update_participant(
        self, participant_id: ParticipantId, data: ParticipantData
    ) -> Participant:
        """Overwrite every type-conditional field of an existing participant."""
        ...

    @abstractmethod
    def delete_participant(self, participant_id: ParticipantId) -> None:
        ...
