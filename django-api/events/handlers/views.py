"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    EventDetailSerializer,
    EventInputSerializer,
    EventSerializer,
    ParticipantInputSerializer,
    ParticipantSerializer,
)
from events.services.event_service import EventService
from events.services.participant_service import ParticipantService
from events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PARTICIPANT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARTICIPANT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_IS_PAST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_DATE_NOT_IN_FUTURE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_REQUIRED_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PERSONAL_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARTICIPANT_COUNT: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    http_status = ERROR_STATUS.get(error.code)
    if http_status is None:
        logger.warning("No HTTP status mapped for %s", error.code.value)
        http_status = status.HTTP_400_BAD_REQUEST
    return Response(
        {"code": error.code.value, "message": error.message},
        status=http_status,
    )


class EventHandlerMixin:
    """Wires services to the Django store and the wall clock."""

    def get_event_service(self) -> EventService:
        return EventService(DjangoEventStore(), clock=timezone.now)

    def get_participant_service(self) -> ParticipantService:
        return ParticipantService(DjangoEventStore(), clock=timezone.now)


class EventListView(EventHandlerMixin, APIView):
    """Handler for GET/POST /api/events"""

    @extend_schema(responses=EventSerializer(many=True))
    def get(self, request: Request) -> Response:
        service = self.get_event_service()
        events = service.list_events()
        serializer = EventSerializer(events, many=True, context={"now": service.now()})
        return Response(serializer.data)

    @extend_schema(request=EventInputSerializer, responses={201: EventSerializer})
    def post(self, request: Request) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        service = self.get_event_service()
        try:
            event = service.create_event(payload.to_event_data())
        except DomainError as exc:
            return error_response(exc)
        serializer = EventSerializer(event, context={"now": service.now()})
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class EventDetailView(EventHandlerMixin, APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    @extend_schema(responses=EventDetailSerializer)
    def get(self, request: Request, event_id: str) -> Response:
        service = self.get_event_service()
        try:
            event = service.get_event(event_id)
        except DomainError as exc:
            return error_response(exc)
        serializer = EventDetailSerializer(event, context={"now": service.now()})
        return Response(serializer.data)

    @extend_schema(request=EventInputSerializer, responses=EventDetailSerializer)
    def put(self, request: Request, event_id: str) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        service = self.get_event_service()
        try:
            event = service.update_event(event_id, payload.to_event_data())
        except DomainError as exc:
            return error_response(exc)
        serializer = EventDetailSerializer(event, context={"now": service.now()})
        return Response(serializer.data)

    @extend_schema(responses={204: None})
    def delete(self, request: Request, event_id: str) -> Response:
        try:
            self.get_event_service().delete_event(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventParticipantListView(EventHandlerMixin, APIView):
    """Handler for GET/POST /api/events/{event_id}/participants"""

    @extend_schema(responses=ParticipantSerializer(many=True))
    def get(self, request: Request, event_id: str) -> Response:
        try:
            participants = self.get_participant_service().list_participants(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(ParticipantSerializer(participants, many=True).data)

    @extend_schema(request=ParticipantInputSerializer, responses={201: ParticipantSerializer})
    def post(self, request: Request, event_id: str) -> Response:
        payload = ParticipantInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        try:
            participant = self.get_participant_service().register_participant(
                event_id, payload.to_draft_fields()
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(
            ParticipantSerializer(participant).data, status=status.HTTP_201_CREATED
        )


class ParticipantDetailView(EventHandlerMixin, APIView):
    """Handler for GET/PUT/DELETE /api/participants/{participant_id}"""

    @extend_schema(responses=ParticipantSerializer)
    def get(self, request: Request, participant_id: str) -> Response:
        try:
            participant = self.get_participant_service().get_participant(participant_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(ParticipantSerializer(participant).data)

    @extend_schema(request=ParticipantInputSerializer, responses=ParticipantSerializer)
    def put(self, request: Request, participant_id: str) -> Response:
        payload = ParticipantInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        try:
            participant = self.get_participant_service().update_participant(
                participant_id, payload.to_draft_fields()
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(ParticipantSerializer(participant).data)

    @extend_schema(responses={204: None})
    def delete(self, request: Request, participant_id: str) -> Response:
        try:
            self.get_participant_service().remove_participant(participant_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
