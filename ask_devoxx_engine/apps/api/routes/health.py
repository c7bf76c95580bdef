"""Health and readiness routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Ask Devoxx skill backend. POST skill requests to /skill."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Health check endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "message": "Ask Devoxx is alive and healthy."})


__all__ = ["router"]
