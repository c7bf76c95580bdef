"""Voice platform webhook route."""

from __future__ import annotations

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ask_devoxx_engine.core.api_models import SkillRequestEnvelope
from ask_devoxx_engine.core.exceptions import InvalidIntentError, UnsupportedRequestTypeError
from ask_devoxx_engine.core.logging import get_logger
from ask_devoxx_engine.services.rendering import render_empty, render_reply
from ask_devoxx_engine.services.skill import SkillDispatcher

from ..dependencies import get_skill_dispatcher

router = APIRouter()
logger = get_logger(__name__)


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@router.post("/skill")
async def handle_skill_request(
    request: Request,
    dispatcher: Annotated[SkillDispatcher, Depends(get_skill_dispatcher)],
):
    """Handle one platform request and return the rendered response envelope."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON received", exc_info=True)
        return _error("Invalid JSON")

    try:
        envelope = SkillRequestEnvelope.model_validate(payload)
    except ValidationError:
        logger.error("Invalid skill request envelope", exc_info=True)
        return _error("Invalid request envelope")

    try:
        # The inquiry call blocks; keep it off the event loop.
        reply = await run_in_threadpool(dispatcher.handle, envelope)
    except InvalidIntentError as exc:
        logger.error("rejecting request %s: %s", envelope.request.request_id, exc)
        return _error(str(exc))
    except UnsupportedRequestTypeError:
        logger.error("rejecting request %s", envelope.request.request_id, exc_info=True)
        return _error("Unsupported request type")

    if reply is None:
        return render_empty()
    return render_reply(reply)


__all__ = ["router"]
