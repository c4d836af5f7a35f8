"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores) and an injected clock
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime

from events.domain.errors import DomainError, EventNotFoundError, InvalidEventIdError
from events.domain.models import Event, EventData
from events.domain.validation import check_event_date, check_event_open
from events.domain.value_objects import EventId
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None


def rejected(operation: str, error: DomainError) -> DomainError:
    logger.info("%s rejected: %s", operation, error.code.value)
    return error


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    def is_past(self, event: Event) -> bool:
        return event.is_past(self._clock())

    def list_events(self) -> list[Event]:
        """Return all events, oldest id first."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError()
        return event

    def create_event(self, data: EventData) -> Event:
        """Schedule a new event.

        Raises:
            EventDateNotInFutureError: If the event date is not after now.
        """
        error = check_event_date(data.event_date, self._clock())
        if error is not None:
            raise rejected("create_event", error)

        event = self._store.create_event(data)
        logger.info("Event %s created", event.id.value)
        return event

    def update_event(self, event_id: str, data: EventData) -> Event:
        """Replace the editable fields of an upcoming event.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            EventIsPastError: If the stored event has already taken place.
            EventDateNotInFutureError: If the new date is not after now.
        """
        parsed_id = parse_event_id(event_id)
        now = self._clock()
        error = check_event_open(self._store.get_event(parsed_id), now) or check_event_date(
            data.event_date, now
        )
        if error is not None:
            raise rejected("update_event", error)

        event = self._store.update_event(parsed_id, data)
        logger.info("Event %s updated", parsed_id.value)
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an upcoming event together with its participants.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            EventIsPastError: If the event has already taken place.
        """
        parsed_id = parse_event_id(event_id)
        error = check_event_open(self._store.get_event(parsed_id), self._clock())
        if error is not None:
            raise rejected("delete_event", error)

        self._store.delete_event(parsed_id)
        logger.info("Event %s deleted", parsed_id.value)
