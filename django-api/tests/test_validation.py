"""Unit tests for participant and event business rules.

The clock is fixed, so past/future decisions are deterministic.
Run with: pytest tests/test_validation.py -v
"""

from datetime import timedelta

import pytest

from events.domain import ParticipantData, ParticipantType, PaymentMethod
from events.domain.errors import ErrorCode
from events.domain.validation import (
    ParticipantDraft,
    check_event_date,
    check_event_open,
    validate_participant,
)
from events.domain.value_objects import EventId
from tests.conftest import NOW, VALID_PERSONAL_CODE


def individual(event_id: EventId, **overrides) -> ParticipantDraft:
    fields = dict(
        event_id=event_id,
        type=ParticipantType.INDIVIDUAL,
        payment_method=PaymentMethod.BANK_TRANSFER,
        first_name="Mari",
        last_name="Maasikas",
        personal_code=VALID_PERSONAL_CODE,
    )
    fields.update(overrides)
    return ParticipantDraft(**fields)


def company(event_id: EventId, **overrides) -> ParticipantDraft:
    fields = dict(
        event_id=event_id,
        type=ParticipantType.COMPANY,
        payment_method=PaymentMethod.CASH,
        company_name="Acme OÜ",
        registration_code="12345678",
        number_of_participants="3",
    )
    fields.update(overrides)
    return ParticipantDraft(**fields)


class TestEventGuards:
    """Tests for check_event_open and check_event_date."""

    def test_missing_event(self):
        assert check_event_open(None, NOW).code is ErrorCode.EVENT_NOT_FOUND

    def test_past_event(self, past_event):
        assert check_event_open(past_event, NOW).code is ErrorCode.EVENT_IS_PAST

    def test_upcoming_event_is_open(self, upcoming_event):
        assert check_event_open(upcoming_event, NOW) is None

    def test_event_date_equal_to_now_is_rejected(self):
        assert check_event_date(NOW, NOW).code is ErrorCode.EVENT_DATE_NOT_IN_FUTURE

    def test_future_event_date_is_accepted(self):
        assert check_event_date(NOW + timedelta(seconds=1), NOW) is None


class TestValidateParticipant:
    """Tests for validate_participant."""

    def test_unknown_event(self, store):
        outcome = validate_participant(individual(EventId(99)), store.get_event, NOW)
        assert outcome.code is ErrorCode.EVENT_NOT_FOUND

    def test_past_event_wins_over_field_errors(self, store, past_event):
        draft = individual(past_event.id, first_name="", personal_code="bad")
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.EVENT_IS_PAST

    def test_past_event_rejects_valid_payload(self, store, past_event):
        outcome = validate_participant(individual(past_event.id), store.get_event, NOW)
        assert outcome.code is ErrorCode.EVENT_IS_PAST

    @pytest.mark.parametrize("field", ["first_name", "last_name", "personal_code"])
    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_individual_requires_fields(self, store, upcoming_event, field, blank):
        draft = individual(upcoming_event.id, **{field: blank})
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.MISSING_REQUIRED_FIELD
        assert field in outcome.message

    @pytest.mark.parametrize("code", ["37605030298", "3760503029", "abcdefghijk"])
    def test_individual_invalid_personal_code(self, store, upcoming_event, code):
        draft = individual(upcoming_event.id, personal_code=code)
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.INVALID_PERSONAL_CODE

    def test_missing_field_reported_before_bad_code(self, store, upcoming_event):
        draft = individual(upcoming_event.id, last_name=" ", personal_code="123")
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.MISSING_REQUIRED_FIELD

    def test_valid_individual_blanks_company_fields(self, store, upcoming_event):
        draft = individual(
            upcoming_event.id,
            company_name="Stale OÜ",
            registration_code="87654321",
            number_of_participants="9",
            additional_info="Vegetarian",
        )
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome == ParticipantData(
            type=ParticipantType.INDIVIDUAL,
            payment_method=PaymentMethod.BANK_TRANSFER,
            first_name="Mari",
            last_name="Maasikas",
            personal_code=VALID_PERSONAL_CODE,
            additional_info="Vegetarian",
        )

    @pytest.mark.parametrize("field", ["company_name", "registration_code"])
    def test_company_requires_fields(self, store, upcoming_event, field):
        draft = company(upcoming_event.id, **{field: "  "})
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.MISSING_REQUIRED_FIELD

    @pytest.mark.parametrize(
        "count",
        ["0", "-1", "abc", "", None, "2.5", "9223372036854775808", "1_000", "+5", "\u0661"],
    )
    def test_company_invalid_participant_count(self, store, upcoming_event, count):
        draft = company(upcoming_event.id, number_of_participants=count)
        outcome = validate_participant(draft, store.get_event, NOW)
        assert outcome.code is ErrorCode.INVALID_PARTICIPANT_COUNT

    def test_valid_company_blanks_individual_fields(self, store, upcoming_event):
        draft = company(
            upcoming_event.id,
            first_name="Mari",
            last_name="Maasikas",
            personal_code=VALID_PERSONAL_CODE,
        )
        outcome = validate_participant(draft, store.get_event, NOW)
        assert isinstance(outcome, ParticipantData)
        assert outcome.number_of_participants == 3
        assert (outcome.first_name, outcome.last_name, outcome.personal_code) == ("", "", "")
        assert outcome.company_name == "Acme OÜ"

    def test_company_with_bad_personal_code_is_still_valid(self, store, upcoming_event):
        """Individual-only fields are ignored, not validated, for companies."""
        draft = company(upcoming_event.id, personal_code="garbage")
        outcome = validate_participant(draft, store.get_event, NOW)
        assert isinstance(outcome, ParticipantData)

    def test_rejection_has_no_side_effects(self, store, upcoming_event):
        validate_participant(
            company(upcoming_event.id, number_of_participants="0"), store.get_event, NOW
        )
        assert store.list_participants(upcoming_event.id) == []
