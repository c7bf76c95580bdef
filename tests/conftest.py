"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real settings are used when present.
"""
from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Callable

import httpx
import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

os.environ.setdefault("INQUIRY_ENDPOINT", "https://inquiry.test/inquiry")
os.environ.setdefault("CARD_IMAGE_URL", "https://images.test/devoxx.png")
os.environ.setdefault("ASK_DEVOXX_LOG_DIR", str(Path(tempfile.gettempdir()) / "ask_devoxx_logs"))

# pylint: disable=wrong-import-position
from ask_devoxx_engine.adapters.inquiry import InquiryAdapter  # noqa: E402
from ask_devoxx_engine.services import ServiceContainer, build_default_services  # noqa: E402

TEST_ENDPOINT = "https://inquiry.test/inquiry"
TEST_IMAGE_URL = "https://images.test/devoxx.png"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


Handler = Callable[[httpx.Request], httpx.Response]


def _json_handler(payload: object, status_code: int = 200) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(status_code, text=json.dumps(payload))

    return _handler


@pytest.fixture
def respond_json() -> Callable[..., Handler]:
    """Factory for handlers answering every request with a JSON payload."""
    return _json_handler


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    """Factory for recording mock transports."""
    return RecordingTransport


@pytest.fixture
def make_services() -> Callable[[httpx.BaseTransport], ServiceContainer]:
    """Factory building the default services with the inquiry call routed to a transport."""

    def _build(transport: httpx.BaseTransport) -> ServiceContainer:
        return build_default_services(
            inquiry_port=InquiryAdapter(TEST_ENDPOINT, timeout=1.0, transport=transport),
            card_image_url=TEST_IMAGE_URL,
        )

    return _build


@pytest.fixture
def answer_transport() -> RecordingTransport:
    """Transport answering with a typical inquiry response."""
    return RecordingTransport(
        _json_handler(
            {
                "responseText": "Devoxx US is a developer conference.",
                "resources": [{"body": "It takes place in San Jose.", "title": "Venue"}],
            }
        )
    )
