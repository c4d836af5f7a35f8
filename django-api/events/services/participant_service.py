"""Participant registration service.

Every write runs the participant validator first; a rejected request
leaves the store untouched.
"""

import logging

from events.domain.errors import (
    EventNotFoundError,
    InvalidParticipantIdError,
    ParticipantNotFoundError,
)
from events.domain.models import Participant, ParticipantData
from events.domain.validation import ParticipantDraft, check_event_open, validate_participant
from events.domain.value_objects import ParticipantId
from events.services.event_service import Clock, parse_event_id, rejected
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_participant_id(participant_id: str) -> ParticipantId:
    try:
        return ParticipantId.from_string(participant_id)
    except ValueError:
        raise InvalidParticipantIdError() from None


class ParticipantService:
    """Service for registering and managing event participants."""

    def __init__(self, store: EventStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def list_participants(self, event_id: str) -> list[Participant]:
        """Return the participants registered for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        if not self._store.event_exists(parsed_id):
            raise EventNotFoundError()
        return self._store.list_participants(parsed_id)

    def get_participant(self, participant_id: str) -> Participant:
        """Return a participant by ID.

        Raises:
            InvalidParticipantIdError: If the id is not a positive integer.
            ParticipantNotFoundError: If the participant does not exist.
        """
        participant = self._store.get_participant(parse_participant_id(participant_id))
        if participant is None:
            raise ParticipantNotFoundError()
        return participant

    def _validate(self, operation: str, draft: ParticipantDraft) -> ParticipantData:
        outcome = validate_participant(draft, self._store.get_event, self._clock())
        if not isinstance(outcome, ParticipantData):
            raise rejected(operation, outcome)
        return outcome

    def register_participant(self, event_id: str, fields: dict) -> Participant:
        """Validate and register a participant under an upcoming event.

        `fields` holds the keyword arguments of ParticipantDraft other than
        event_id.
        """
        parsed_id = parse_event_id(event_id)
        data = self._validate(
            "register_participant", ParticipantDraft(event_id=parsed_id, **fields)
        )
        participant = self._store.add_participant(parsed_id, data)
        logger.info(
            "Participant %s (%s) registered for event %s",
            participant.id.value,
            participant.type.value,
            parsed_id.value,
        )
        return participant

    def update_participant(self, participant_id: str, fields: dict) -> Participant:
        """Revalidate and overwrite a participant of an upcoming event.

        The participant may switch type; fields of the previous type are
        cleared.
        """
        existing = self.get_participant(participant_id)
        data = self._validate(
            "update_participant", ParticipantDraft(event_id=existing.event_id, **fields)
        )
        participant = self._store.update_participant(existing.id, data)
        logger.info("Participant %s updated", existing.id.value)
        return participant

    def remove_participant(self, participant_id: str) -> None:
        """Remove a participant from an upcoming event.

        Raises:
            ParticipantNotFoundError: If the participant does not exist.
            EventIsPastError: If the participant's event has taken place.
        """
        existing = self.get_participant(participant_id)
        error = check_event_open(self._store.get_event(existing.event_id), self._clock())
        if error is not None:
            raise rejected("remove_participant", error)

        self._store.delete_participant(existing.id)
        logger.info("Participant %s removed", existing.id.value)
