"""Inquiry handling: forward a spoken command and turn the answer into a reply."""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from ask_devoxx_engine.core.logging import get_logger
from ask_devoxx_engine.core.models import (
    InquiryErrorKind,
    InquiryResponse,
    SpokenReply,
)
from ask_devoxx_engine.core.ports import InquiryPort

logger = get_logger(__name__)

SERVICE_PROBLEM_TEXT = (
    "Sorry, the Ask Devoxx inquiry service is experiencing a problem. Please try again later."
)
UNABLE_TO_RESPOND_TEXT = "Unable to respond to your inquiry\n"
INVALID_INQUIRY_PREFIX = "Invalid inquiry; "
# Only the leading resources are read aloud.
MAX_SPOKEN_RESOURCES = 2


def parse_inquiry_response(body: str) -> InquiryResponse:
    """Parse the inquiry service body.

    Raises:
        pydantic.ValidationError: the body is not JSON or lacks the expected fields.
    """
    return InquiryResponse.model_validate_json(body)


def compose_response_text(response: InquiryResponse) -> str:
    """Join ``responseText`` with the bodies of the first two resources."""
    parts = [response.response_text]
    parts.extend(resource.body for resource in response.resources[:MAX_SPOKEN_RESOURCES])
    text = "\n".join(parts)
    return text or UNABLE_TO_RESPOND_TEXT


class InquiryService:
    """Answers one-shot commands using the remote inquiry service."""

    def __init__(self, inquiry: InquiryPort, *, card_image_url: str) -> None:
        self._inquiry = inquiry
        self._card_image_url = card_image_url

    def handle_command(self, command_text: Optional[str]) -> SpokenReply:
        """Return the spoken reply and card for ``command_text``.

        Network and parse failures are reported to the user as an apology; they
        never raise.
        """
        if not command_text:
            speech = f"{INVALID_INQUIRY_PREFIX}{command_text}"
            return self._card_reply(command_text, speech, image_url=None)

        speech, error = self._answer(command_text)
        if error is not None:
            logger.warning("inquiry for %r failed: %s", command_text, error.value)
            return self._card_reply(command_text, speech, image_url=None)
        return self._card_reply(command_text, speech, image_url=self._card_image_url)

    def _answer(self, command_text: str) -> tuple[str, Optional[InquiryErrorKind]]:
        fetched = self._inquiry.fetch(command_text)
        if not fetched.ok:
            return SERVICE_PROBLEM_TEXT, fetched.error or InquiryErrorKind.EMPTY_RESPONSE_BODY

        try:
            response = parse_inquiry_response(fetched.body)
        except ValidationError:
            logger.error("Exception occurred while parsing service response.", exc_info=True)
            return SERVICE_PROBLEM_TEXT, InquiryErrorKind.MALFORMED_JSON

        logger.info("inquiry response: %s", response.response_text)
        return compose_response_text(response), None

    @staticmethod
    def _card_reply(
        command_text: Optional[str], speech: str, *, image_url: Optional[str]
    ) -> SpokenReply:
        return SpokenReply(
            speech_text=speech,
            is_ssml=False,
            card_title=command_text,
            card_body=speech,
            card_image_url=image_url,
            has_card=True,
        )


__all__ = [
    "InquiryService",
    "compose_response_text",
    "parse_inquiry_response",
    "SERVICE_PROBLEM_TEXT",
    "UNABLE_TO_RESPOND_TEXT",
    "INVALID_INQUIRY_PREFIX",
]
