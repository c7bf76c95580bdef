"""HTTP adapter implementing the inquiry port with httpx."""

from __future__ import annotations

from urllib.parse import quote_plus

import httpx

from ask_devoxx_engine.core.logging import get_logger
from ask_devoxx_engine.core.models import InquiryErrorKind, InquiryFetch
from ask_devoxx_engine.core.ports import InquiryPort

logger = get_logger(__name__)


def build_inquiry_url(endpoint: str, command_text: str) -> str:
    """Return ``endpoint`` with ``command_text`` form-encoded as the ``text`` parameter."""
    # Unencodable characters (lone surrogates) become "?" instead of raising.
    return f"{endpoint}?text={quote_plus(command_text, encoding='utf-8', errors='replace')}"


class InquiryAdapter(InquiryPort):
    """Blocking GET against the inquiry endpoint.

    ``transport`` lets callers substitute the network layer (for example an
    ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    def fetch(self, command_text: str) -> InquiryFetch:
        url = build_inquiry_url(self.endpoint, command_text)
        logger.info("calling inquiry service: %s", url)
        try:
            with httpx.Client(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                body = response.text
        except httpx.HTTPError:
            logger.error("inquiry request failed for %s", url, exc_info=True)
            return InquiryFetch(error=InquiryErrorKind.NETWORK_FAILURE)

        logger.info("inquiry service returned %d characters.", len(body))
        if not body:
            return InquiryFetch(error=InquiryErrorKind.EMPTY_RESPONSE_BODY)
        return InquiryFetch(body=body)


__all__ = ["InquiryAdapter", "build_inquiry_url"]
