"""Top-level FastAPI entrypoint (``uvicorn ask_devoxx:app``)."""

from ask_devoxx_engine.api_factory import create_app

app = create_app()

__all__ = ["app", "create_app"]
