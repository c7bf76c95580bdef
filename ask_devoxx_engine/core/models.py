"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ask_devoxx_engine.core.api_models import IntentPayload
from ask_devoxx_engine.core.intents import SLOT_COMMAND


def _utf8_safe(value: Optional[str]) -> Optional[str]:
    """Replace characters UTF-8 cannot carry, such as lone surrogates, with "?"."""
    if value is None:
        return None
    return value.encode("utf-8", "replace").decode("utf-8")


@dataclass(slots=True)
class IntentEvent:
    """Normalized intent invocation extracted from a platform envelope."""

    intent_name: str
    command_slot_value: Optional[str] = None

    @classmethod
    def from_intent(cls, intent: IntentPayload) -> "IntentEvent":
        """Build an event from the envelope's intent, keeping only the Command slot."""
        slot = intent.slots.get(SLOT_COMMAND)
        return cls(
            intent_name=intent.name,
            command_slot_value=_utf8_safe(slot.value) if slot is not None else None,
        )


class InquiryErrorKind(str, Enum):
    """Failure kinds of the outbound inquiry call."""

    NETWORK_FAILURE = "network-failure"
    EMPTY_RESPONSE_BODY = "empty-response-body"
    MALFORMED_JSON = "malformed-json"


@dataclass(slots=True)
class InquiryFetch:
    """Raw outcome of one inquiry GET: the body text or the kind of failure."""

    body: str = ""
    error: Optional[InquiryErrorKind] = None

    @property
    def ok(self) -> bool:
        """True when the call succeeded with a non-empty body."""
        return self.error is None and bool(self.body)


class Resource(BaseModel):
    """A supporting resource returned by the inquiry service."""

    body: str


class InquiryResponse(BaseModel):
    """Parsed JSON body of the inquiry service."""

    response_text: str = Field(alias="responseText")
    resources: List[Resource] = Field(default_factory=list)


@dataclass(slots=True)
class SpokenReply:
    """Speech, reprompt and card produced for a single platform request."""

    speech_text: str
    is_ssml: bool = False
    card_title: Optional[str] = None
    card_body: str = ""
    card_image_url: Optional[str] = None
    reprompt_text: Optional[str] = None
    is_reprompt_ssml: bool = False
    should_end_session: bool = True
    has_card: bool = False

    @property
    def is_ask(self) -> bool:
        """True when the reply keeps the session open for a follow-up utterance."""
        return not self.should_end_session


__all__ = [
    "IntentEvent",
    "InquiryErrorKind",
    "InquiryFetch",
    "Resource",
    "InquiryResponse",
    "SpokenReply",
]
