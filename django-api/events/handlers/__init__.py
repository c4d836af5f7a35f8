from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventParticipantListView,
    ParticipantDetailView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventParticipantListView",
    "ParticipantDetailView",
]
