"""Serializers for request parsing and for rendering domain models.

Input serializers check format only (types, lengths, choices). Business
rules such as required fields per participant type are left to the domain
validators.
"""

from rest_framework import serializers

from events.domain import EventData, ParticipantType, PaymentMethod


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class EventInputSerializer(serializers.Serializer):
    """Payload for creating or updating an event."""

    name = serializers.CharField(max_length=200)
    location = serializers.CharField(max_length=200)
    event_date = serializers.DateTimeField()
    additional_info = serializers.CharField(
        max_length=1000, required=False, allow_blank=True, default=""
    )

    def to_event_data(self) -> EventData:
        return EventData(**self.validated_data)


class ParticipantInputSerializer(serializers.Serializer):
    """Payload for registering or updating a participant.

    Type-conditional fields are all optional here; which ones are required
    depends on `type` and is decided by the participant validator.
    """

    type = serializers.ChoiceField(choices=_choices(ParticipantType))
    payment_method = serializers.ChoiceField(choices=_choices(PaymentMethod))
    first_name = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )
    last_name = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )
    personal_code = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    company_name = serializers.CharField(
        max_length=200, required=False, allow_blank=True, allow_null=True
    )
    registration_code = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True
    )
    # Kept as text so non-numeric input reaches the validator.
    number_of_participants = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    additional_info = serializers.CharField(
        max_length=5000, required=False, allow_blank=True, allow_null=True
    )

    def to_draft_fields(self) -> dict:
        """Return keyword arguments for ParticipantDraft, minus event_id."""
        fields = dict(self.validated_data)
        fields["type"] = ParticipantType(fields["type"])
        fields["payment_method"] = PaymentMethod(fields["payment_method"])
        return fields


class ParticipantSerializer(serializers.Serializer):
    """Serializer for Participant domain model."""

    id = serializers.IntegerField(source="id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    type = serializers.CharField(source="type.value")
    payment_method = serializers.CharField(source="payment_method.value")
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    personal_code = serializers.CharField()
    company_name = serializers.CharField()
    registration_code = serializers.CharField()
    number_of_participants = serializers.IntegerField(allow_null=True)
    additional_info = serializers.CharField()
    display_name = serializers.CharField()
    created_at = serializers.DateTimeField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model, as shown in listings.

    Needs `now` in the serializer context to compute `is_past_event`.
    """

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    location = serializers.CharField()
    event_date = serializers.DateTimeField()
    additional_info = serializers.CharField()
    participant_count = serializers.IntegerField()
    is_past_event = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_is_past_event(self, event) -> bool:
        return event.is_past(self.context["now"])


class EventDetailSerializer(EventSerializer):
    """Event with its registered participants."""

    participants = ParticipantSerializer(many=True)
