from django.urls import path

from events.handlers import (
    EventDetailView,
    EventListView,
    EventParticipantListView,
    ParticipantDetailView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/participants",
        EventParticipantListView.as_view(),
        name="event-participant-list",
    ),
    path(
        "participants/<str:participant_id>",
        ParticipantDetailView.as_view(),
        name="participant-detail",
    ),
]
