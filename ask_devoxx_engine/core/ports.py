"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol

from ask_devoxx_engine.core.models import InquiryFetch


class InquiryPort(Protocol):
    """Port exposing the remote inquiry service."""

    def fetch(self, command_text: str) -> InquiryFetch:
        """Send ``command_text`` to the inquiry service and return the raw outcome.

        Implementations never raise for transport problems; failures come back as
        an :class:`InquiryFetch` carrying an error kind.
        """
        ...


__all__ = ["InquiryPort"]
