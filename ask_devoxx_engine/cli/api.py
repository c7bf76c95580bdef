"""CLI command to run the webhook API."""

from __future__ import annotations

import typer
import uvicorn

app = typer.Typer(name="api", help="Run the skill webhook API")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
) -> None:
    """Serve the FastAPI app with uvicorn."""
    from ask_devoxx_engine.api_factory import (  # pylint: disable=import-outside-toplevel
        create_app,
    )

    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["app"]
