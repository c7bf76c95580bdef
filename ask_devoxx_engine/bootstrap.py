"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from ask_devoxx_engine.adapters.inquiry import InquiryAdapter
from ask_devoxx_engine.core.config import Settings, settings
from ask_devoxx_engine.services import ServiceContainer, build_default_services


def build_default_service_container(app_settings: Settings | None = None) -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    cfg = app_settings or settings
    return build_default_services(
        inquiry_port=InquiryAdapter(
            cfg.INQUIRY_ENDPOINT,
            timeout=cfg.INQUIRY_TIMEOUT_SECONDS,
        ),
        card_image_url=cfg.CARD_IMAGE_URL,
    )


__all__ = ["build_default_service_container"]
