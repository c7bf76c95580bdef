"""Builders for the ask and tell replies returned to the voice platform."""

from __future__ import annotations

from ask_devoxx_engine.core.models import SpokenReply

WELCOME_PROMPT = "What is your question?"
WELCOME_SSML = "<speak>Welcome to Ask Devoxx. " + WELCOME_PROMPT + "</speak>"
WELCOME_REPROMPT = "You can simply say Ask Devoxx and ask a question like, what is Devoxx U.S. "
GOODBYE_TEXT = "Goodbye"


def build_ask_reply(
    text: str,
    is_output_ssml: bool = False,
    reprompt_text: str = "",
    is_reprompt_ssml: bool = False,
) -> SpokenReply:
    """Return an ask reply that keeps the session open.

    Args:
        text: the output to be spoken.
        is_output_ssml: whether ``text`` is SSML markup.
        reprompt_text: spoken if the user does not reply or is misunderstood.
        is_reprompt_ssml: whether ``reprompt_text`` is SSML markup.
    """
    return SpokenReply(
        speech_text=text,
        is_ssml=is_output_ssml,
        reprompt_text=reprompt_text,
        is_reprompt_ssml=is_reprompt_ssml,
        should_end_session=False,
    )


def build_tell_reply(text: str) -> SpokenReply:
    """Return a plain-text reply that ends the session."""
    return SpokenReply(speech_text=text)


def build_welcome_reply() -> SpokenReply:
    """Greeting spoken when the skill is opened without a question."""
    return build_ask_reply(WELCOME_SSML, True, WELCOME_REPROMPT, False)


def build_goodbye_reply() -> SpokenReply:
    return build_tell_reply(GOODBYE_TEXT)


__all__ = [
    "build_ask_reply",
    "build_tell_reply",
    "build_welcome_reply",
    "build_goodbye_reply",
    "WELCOME_SSML",
    "WELCOME_REPROMPT",
    "GOODBYE_TEXT",
]
