"""Tests for core data models and wire envelopes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ask_devoxx_engine.core.api_models import IntentPayload, SkillRequestEnvelope
from ask_devoxx_engine.core.models import InquiryErrorKind, InquiryFetch, InquiryResponse, IntentEvent


def test_intent_event_reads_command_slot() -> None:
    """Only the Command slot value is carried onto the event."""
    intent = IntentPayload.model_validate(
        {
            "name": "OneShotCommandIntent",
            "slots": {
                "Command": {"name": "Command", "value": "what is Devoxx"},
                "Other": {"name": "Other", "value": "ignored"},
            },
        }
    )

    event = IntentEvent.from_intent(intent)

    assert event.intent_name == "OneShotCommandIntent"
    assert event.command_slot_value == "what is Devoxx"


def test_intent_event_missing_slot_or_value() -> None:
    """A missing slot and a slot without value both yield an absent command."""
    no_slot = IntentPayload.model_validate({"name": "OneShotCommandIntent"})
    no_value = IntentPayload.model_validate(
        {"name": "OneShotCommandIntent", "slots": {"Command": {"name": "Command"}}}
    )

    assert IntentEvent.from_intent(no_slot).command_slot_value is None
    assert IntentEvent.from_intent(no_value).command_slot_value is None


def test_intent_event_replaces_lone_surrogates() -> None:
    """Command text that UTF-8 cannot carry is made safe for the URL and the card."""
    intent = IntentPayload.model_validate(
        {
            "name": "OneShotCommandIntent",
            "slots": {"Command": {"name": "Command", "value": "hi \ud800 caf\u00e9"}},
        }
    )

    assert IntentEvent.from_intent(intent).command_slot_value == "hi ? caf\u00e9"


def test_inquiry_fetch_ok_flag() -> None:
    """Only a non-empty body without an error counts as success."""
    assert InquiryFetch(body="{}").ok is True
    assert InquiryFetch(body="").ok is False
    assert InquiryFetch(error=InquiryErrorKind.NETWORK_FAILURE).ok is False


def test_inquiry_response_ignores_extra_fields() -> None:
    """Unknown response and resource fields are ignored."""
    response = InquiryResponse.model_validate_json(
        '{"responseText": "A", "intent": "x", "resources": [{"body": "B", "title": "t"}]}'
    )
    assert response.response_text == "A"
    assert [r.body for r in response.resources] == ["B"]


def test_inquiry_response_resources_default_empty() -> None:
    """An omitted resources list is treated as empty."""
    assert InquiryResponse.model_validate_json('{"responseText": "A"}').resources == []


def test_inquiry_response_resource_requires_body() -> None:
    """A resource entry without a body is malformed."""
    with pytest.raises(ValidationError):
        InquiryResponse.model_validate_json('{"responseText": "A", "resources": [{}]}')


def test_request_envelope_parses_camel_case() -> None:
    """Envelope fields are read from their platform wire names."""
    envelope = SkillRequestEnvelope.model_validate(
        {
            "version": "1.0",
            "session": {"sessionId": "s-1", "new": True, "application": {"applicationId": "a"}},
            "request": {
                "type": "IntentRequest",
                "requestId": "r-1",
                "locale": "en-US",
                "intent": {"name": "AMAZON.StopIntent", "slots": {}},
            },
        }
    )

    assert envelope.session.session_id == "s-1"
    assert envelope.session.new is True
    assert envelope.request.request_id == "r-1"
    assert envelope.request.intent is not None
    assert envelope.request.intent.name == "AMAZON.StopIntent"


def test_request_envelope_requires_request() -> None:
    """An envelope without a request section is rejected."""
    with pytest.raises(ValidationError):
        SkillRequestEnvelope.model_validate({"version": "1.0"})
