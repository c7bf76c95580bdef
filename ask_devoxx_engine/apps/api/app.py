"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ask_devoxx_engine.apps.api.middleware import CorrelationIdMiddleware
from ask_devoxx_engine.core.logging import get_logger
from ask_devoxx_engine.services import ServiceContainer
from ask_devoxx_engine.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the service container for the lifetime of the app."""
    logger.info("Initializing ask devoxx engine...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
    try:
        yield
    finally:
        logger.info("ask devoxx engine shutting down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
