"""Handlers for the intents the skill recognizes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ask_devoxx_engine.core.intents import IntentName
from ask_devoxx_engine.core.models import IntentEvent, SpokenReply

from .intent_router import IntentHandler
from .replies import build_goodbye_reply

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


def handle_one_shot_command(event: IntentEvent, services: "ServiceContainer") -> SpokenReply:
    """Answer a single spoken question through the inquiry service."""
    if services.inquiry is None:
        raise RuntimeError("InquiryService has not been configured.")
    return services.inquiry.handle_command(event.command_slot_value)


def handle_goodbye(event: IntentEvent, services: "ServiceContainer") -> SpokenReply:
    """Stop and cancel both end the conversation."""
    del event, services
    return build_goodbye_reply()


DEFAULT_INTENT_HANDLERS: dict[IntentName, IntentHandler] = {
    IntentName.ONE_SHOT_COMMAND: handle_one_shot_command,
    IntentName.STOP: handle_goodbye,
    IntentName.CANCEL: handle_goodbye,
}


__all__ = ["handle_one_shot_command", "handle_goodbye", "DEFAULT_INTENT_HANDLERS"]
