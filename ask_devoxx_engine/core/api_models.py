"""Wire models for the voice platform's request and response envelopes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _EnvelopeModel(BaseModel):
    """Base model accepting camelCase wire names and ignoring unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SlotPayload(_EnvelopeModel):
    """A named slot carried on an intent."""

    name: str
    value: str | None = None


class IntentPayload(_EnvelopeModel):
    """The classified intent with its slot values."""

    name: str
    slots: dict[str, SlotPayload] = Field(default_factory=dict)


class SkillRequest(_EnvelopeModel):
    """The ``request`` section of an inbound envelope."""

    type: str
    request_id: str = Field(default="", alias="requestId")
    timestamp: str | None = None
    locale: str | None = None
    reason: str | None = Field(default=None, description="Set on SessionEndedRequest")
    intent: IntentPayload | None = None


class SkillSession(_EnvelopeModel):
    """The ``session`` section of an inbound envelope."""

    session_id: str = Field(default="", alias="sessionId")
    new: bool = False


class SkillRequestEnvelope(_EnvelopeModel):
    """Full inbound envelope posted by the voice platform."""

    version: str = "1.0"
    session: SkillSession = Field(default_factory=SkillSession)
    request: SkillRequest


class PlainTextSpeech(_EnvelopeModel):
    """Plain text output speech."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SsmlSpeech(_EnvelopeModel):
    """SSML output speech."""

    type: Literal["SSML"] = "SSML"
    ssml: str


class CardImage(_EnvelopeModel):
    """Image references shown on a standard card."""

    small_image_url: str | None = Field(default=None, alias="smallImageUrl")
    large_image_url: str | None = Field(default=None, alias="largeImageUrl")


class StandardCard(_EnvelopeModel):
    """Visual card displayed on screen-equipped devices."""

    type: Literal["Standard"] = "Standard"
    title: str | None = None
    text: str = ""
    image: CardImage | None = None


class Reprompt(_EnvelopeModel):
    """Speech used when the user does not answer an ask response."""

    output_speech: PlainTextSpeech | SsmlSpeech = Field(alias="outputSpeech")


class SkillResponse(_EnvelopeModel):
    """The ``response`` section of an outbound envelope."""

    output_speech: PlainTextSpeech | SsmlSpeech | None = Field(
        default=None, alias="outputSpeech"
    )
    card: StandardCard | None = None
    reprompt: Reprompt | None = None
    should_end_session: bool = Field(default=True, alias="shouldEndSession")


class SkillResponseEnvelope(_EnvelopeModel):
    """Full outbound envelope returned to the voice platform."""

    version: str = "1.0"
    response: SkillResponse


__all__ = [
    "SlotPayload",
    "IntentPayload",
    "SkillRequest",
    "SkillSession",
    "SkillRequestEnvelope",
    "PlainTextSpeech",
    "SsmlSpeech",
    "CardImage",
    "StandardCard",
    "Reprompt",
    "SkillResponse",
    "SkillResponseEnvelope",
]
