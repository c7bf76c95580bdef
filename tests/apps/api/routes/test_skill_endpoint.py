"""Tests for the POST /skill webhook."""
# pylint: disable=missing-function-docstring,redefined-outer-name

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional, cast

import httpx
import pytest
from fastapi.testclient import TestClient

from ask_devoxx_engine.apps.api.app import create_app


@pytest.fixture
def client(make_services, answer_transport) -> TestClient:
    return TestClient(create_app(make_services(answer_transport)))


def _body(request_type: str, intent: Optional[str] = None, command: Optional[str] = None) -> dict:
    request: dict[str, Any] = {"type": request_type, "requestId": "amzn1.request.1"}
    if intent is not None:
        slots = {"Command": {"name": "Command", "value": command}} if command is not None else {}
        request["intent"] = {"name": intent, "slots": slots}
    return {
        "version": "1.0",
        "session": {"sessionId": "amzn1.session.1", "new": False},
        "request": request,
    }


def test_launch_request_returns_ask(client):
    resp = client.post("/skill", json=_body("LaunchRequest"))

    assert resp.status_code == HTTPStatus.OK
    response = resp.json()["response"]
    assert response["outputSpeech"]["type"] == "SSML"
    assert response["shouldEndSession"] is False
    assert "reprompt" in response


def test_one_shot_command_returns_tell_with_card(client, answer_transport):
    resp = client.post(
        "/skill", json=_body("IntentRequest", "OneShotCommandIntent", "what is Devoxx US")
    )

    assert resp.status_code == HTTPStatus.OK
    response = resp.json()["response"]
    expected = "Devoxx US is a developer conference.\nIt takes place in San Jose."
    assert response["outputSpeech"] == {"type": "PlainText", "text": expected}
    assert response["card"]["title"] == "what is Devoxx US"
    assert response["card"]["text"] == expected
    assert response["card"]["image"]["smallImageUrl"] == "https://images.test/devoxx.png"
    assert response["shouldEndSession"] is True
    assert [r.url.params["text"] for r in answer_transport.requests] == ["what is Devoxx US"]


def test_inquiry_outage_is_apology_not_error(make_services, make_transport):
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = TestClient(create_app(make_services(make_transport(_refuse))))

    resp = client.post("/skill", json=_body("IntentRequest", "OneShotCommandIntent", "hello"))

    assert resp.status_code == HTTPStatus.OK
    response = resp.json()["response"]
    assert response["outputSpeech"]["text"].startswith("Sorry, the Ask Devoxx inquiry service")
    assert "image" not in response["card"]


@pytest.mark.parametrize("intent", ["AMAZON.StopIntent", "AMAZON.CancelIntent"])
def test_stop_and_cancel(client, intent):
    resp = client.post("/skill", json=_body("IntentRequest", intent))

    assert resp.status_code == HTTPStatus.OK
    assert resp.json()["response"]["outputSpeech"] == {"type": "PlainText", "text": "Goodbye"}


def test_unknown_intent_is_rejected(client, answer_transport):
    resp = client.post("/skill", json=_body("IntentRequest", "AMAZON.HelpIntent"))

    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.json() == {"error": "Invalid Intent"}
    assert answer_transport.requests == []


def test_session_ended_returns_empty_envelope(client):
    resp = client.post("/skill", json=_body("SessionEndedRequest"))

    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == {"version": "1.0", "response": {"shouldEndSession": True}}


def test_unsupported_request_type(client):
    resp = client.post("/skill", json=_body("AudioPlayer.PlaybackStarted"))

    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.json() == {"error": "Unsupported request type"}


def test_invalid_json(client):
    resp = client.post(
        "/skill", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.json() == {"error": "Invalid JSON"}


def test_invalid_envelope(client):
    resp = client.post("/skill", json={"version": "1.0"})

    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.json() == {"error": "Invalid request envelope"}


def test_correlation_id_is_echoed(client):
    resp = client.post(
        "/skill", json=_body("LaunchRequest"), headers={"X-Request-ID": "trace-123"}
    )

    assert resp.headers["X-Request-ID"] == "trace-123"
    assert resp.headers["X-Correlation-ID"] == "trace-123"


def test_command_with_lone_surrogate_is_answered(client, answer_transport):
    # Escaped in the JSON text; json.dumps on the client side would refuse to encode it.
    raw = (
        '{"version": "1.0", "session": {"sessionId": "amzn1.session.1", "new": false},'
        ' "request": {"type": "IntentRequest", "requestId": "amzn1.request.1",'
        ' "intent": {"name": "OneShotCommandIntent",'
        ' "slots": {"Command": {"name": "Command", "value": "hi \\ud800"}}}}}'
    )

    resp = client.post("/skill", content=raw, headers={"Content-Type": "application/json"})

    assert resp.status_code == HTTPStatus.OK
    response = resp.json()["response"]
    assert response["card"]["title"] == "hi ?"
    assert answer_transport.requests[0].url.params["text"] == "hi ?"


def test_generated_correlation_id_and_request_log(client, caplog):
    with caplog.at_level(logging.INFO, logger="ask_devoxx_engine.apps.api.middleware"):
        resp = client.post("/skill", json=_body("LaunchRequest"))

    generated = resp.headers["X-Request-ID"]
    assert generated
    assert resp.headers["X-Correlation-ID"] == generated
    records = [r for r in caplog.records if getattr(r, "event", None) == "http_request"]
    assert len(records) == 1
    record = cast(Any, records[0])
    assert record.method == "POST"
    assert record.path == "/skill"
    assert record.status_code == HTTPStatus.OK
