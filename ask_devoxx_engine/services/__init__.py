"""Application service layer scaffolding for intent handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ask_devoxx_engine.core.ports import InquiryPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .inquiry import InquiryService
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    inquiry: Optional["InquiryService"] = None
    intent_router: Optional["IntentRouter"] = None


def build_default_services(
    *,
    inquiry_port: Optional[InquiryPort] = None,
    card_image_url: str = "",
) -> ServiceContainer:
    """Return a service container with the default intent router wiring."""

    # pylint: disable=import-outside-toplevel
    from .inquiry import InquiryService
    from .intent_handlers import DEFAULT_INTENT_HANDLERS
    from .intent_router import IntentRouter

    inquiry = (
        InquiryService(inquiry_port, card_image_url=card_image_url)
        if inquiry_port is not None
        else None
    )
    return ServiceContainer(
        inquiry=inquiry,
        intent_router=IntentRouter(DEFAULT_INTENT_HANDLERS),
    )


__all__ = ["ServiceContainer", "build_default_services"]
