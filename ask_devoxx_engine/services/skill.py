"""Skill request dispatcher following the platform's session lifecycle.

Launch requests get the welcome prompt, intent requests are routed through the
:class:`IntentRouter`, and session-ended requests are acknowledged without
speech. Only an unrecognized intent or request type is surfaced to the
platform as an error.
"""

from __future__ import annotations

from typing import Optional

from ask_devoxx_engine.core.api_models import SkillRequest, SkillRequestEnvelope, SkillSession
from ask_devoxx_engine.core.exceptions import InvalidIntentError, UnsupportedRequestTypeError
from ask_devoxx_engine.core.intents import RequestType
from ask_devoxx_engine.core.logging import get_logger, skill_request_context
from ask_devoxx_engine.core.models import IntentEvent, SpokenReply

from . import ServiceContainer
from .replies import build_welcome_reply

logger = get_logger(__name__)


class SkillDispatcher:
    """Entry point translating platform envelopes into spoken replies."""

    def __init__(self, services: ServiceContainer) -> None:
        self._services = services

    def handle(self, envelope: SkillRequestEnvelope) -> Optional[SpokenReply]:
        """Dispatch ``envelope`` by request type.

        Returns ``None`` for requests that produce no speech (session ended).

        Raises:
            InvalidIntentError: the intent name is not one the skill handles.
            UnsupportedRequestTypeError: the request type is unknown.
        """
        request, session = envelope.request, envelope.session
        with skill_request_context(request.request_id, session.session_id):
            if session.new:
                self.on_session_started(request, session)

            if request.type == RequestType.LAUNCH.value:
                return self.on_launch(request, session)
            if request.type == RequestType.INTENT.value:
                return self.on_intent(request, session)
            if request.type == RequestType.SESSION_ENDED.value:
                self.on_session_ended(request, session)
                return None
            logger.warning("unsupported request type: %s", request.type)
            raise UnsupportedRequestTypeError(f"Unsupported request type: {request.type}")

    def on_session_started(self, request: SkillRequest, session: SkillSession) -> None:
        logger.info(
            "onSessionStarted requestId=%s, sessionId=%s", request.request_id, session.session_id
        )

    def on_launch(self, request: SkillRequest, session: SkillSession) -> SpokenReply:
        logger.info("onLaunch requestId=%s, sessionId=%s", request.request_id, session.session_id)
        return build_welcome_reply()

    def on_intent(self, request: SkillRequest, session: SkillSession) -> SpokenReply:
        logger.info("onIntent requestId=%s, sessionId=%s", request.request_id, session.session_id)
        if request.intent is None:
            raise InvalidIntentError()

        event = IntentEvent.from_intent(request.intent)
        if event.command_slot_value is not None:
            logger.info("received a Command request: %s", event.command_slot_value)
        else:
            logger.info("no Command value in %s request", event.intent_name)

        router = self._services.intent_router
        if router is None:
            raise RuntimeError("IntentRouter has not been configured.")
        return router.dispatch(event, self._services)

    def on_session_ended(self, request: SkillRequest, session: SkillSession) -> None:
        logger.info(
            "onSessionEnded requestId=%s, sessionId=%s, reason=%s",
            request.request_id,
            session.session_id,
            request.reason,
        )


__all__ = ["SkillDispatcher"]
