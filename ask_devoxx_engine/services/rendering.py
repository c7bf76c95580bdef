"""Serialize spoken replies into the platform's response envelope."""

from __future__ import annotations

from typing import Any, Optional

from ask_devoxx_engine.core.api_models import (
    CardImage,
    PlainTextSpeech,
    Reprompt,
    SkillResponse,
    SkillResponseEnvelope,
    SsmlSpeech,
    StandardCard,
)
from ask_devoxx_engine.core.models import SpokenReply


def _speech(text: str, is_ssml: bool) -> PlainTextSpeech | SsmlSpeech:
    if is_ssml:
        return SsmlSpeech(ssml=text)
    return PlainTextSpeech(text=text)


def _card(reply: SpokenReply) -> Optional[StandardCard]:
    if not reply.has_card:
        return None
    image = CardImage(small_image_url=reply.card_image_url) if reply.card_image_url else None
    return StandardCard(title=reply.card_title, text=reply.card_body, image=image)


def build_response_envelope(reply: SpokenReply) -> SkillResponseEnvelope:
    """Return the typed envelope for ``reply``.

    Ask replies carry a reprompt and keep the session open; tell replies end it.
    """
    reprompt = None
    if reply.is_ask:
        reprompt = Reprompt(
            output_speech=_speech(reply.reprompt_text or "", reply.is_reprompt_ssml)
        )
    return SkillResponseEnvelope(
        response=SkillResponse(
            output_speech=_speech(reply.speech_text, reply.is_ssml),
            card=_card(reply),
            reprompt=reprompt,
            should_end_session=reply.should_end_session,
        )
    )


def render_reply(reply: SpokenReply) -> dict[str, Any]:
    """Return the JSON-ready envelope for ``reply``."""
    return build_response_envelope(reply).model_dump(by_alias=True, exclude_none=True)


def render_empty() -> dict[str, Any]:
    """Envelope acknowledging a request that produces no speech."""
    envelope = SkillResponseEnvelope(response=SkillResponse(should_end_session=True))
    return envelope.model_dump(by_alias=True, exclude_none=True)


__all__ = ["build_response_envelope", "render_reply", "render_empty"]
