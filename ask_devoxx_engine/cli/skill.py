"""CLI commands to talk to the skill without a voice device."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ask_devoxx_engine.bootstrap import build_default_service_container
from ask_devoxx_engine.core.models import SpokenReply
from ask_devoxx_engine.services.replies import build_welcome_reply

app = typer.Typer(name="skill", help="Exercise the skill locally")
console = Console()


def _print_reply(reply: SpokenReply) -> None:
    kind = "ask" if reply.is_ask else "tell"
    speech_type = "SSML" if reply.is_ssml else "PlainText"
    console.print(f"[bold]{kind}[/bold] ({speech_type})")
    console.print(Text(reply.speech_text))
    if reply.reprompt_text:
        console.print(Text.assemble(("reprompt: ", "dim"), reply.reprompt_text))
    if reply.has_card:
        body = Text(reply.card_body)
        if reply.card_image_url:
            body.append(f"\n\n{reply.card_image_url}", style="dim")
        console.print(Panel(body, title=Text(str(reply.card_title))))


@app.command("ask")
def ask(
    question: str = typer.Argument(..., help="The question, as it would be spoken"),
) -> None:
    """Send QUESTION to the inquiry service and print the skill's reply."""
    services = build_default_service_container()
    if services.inquiry is None:
        console.print("[red]Error:[/red] inquiry service is not configured")
        raise typer.Exit(1)
    _print_reply(services.inquiry.handle_command(question))


@app.command("welcome")
def welcome() -> None:
    """Print the greeting spoken when the skill is opened."""
    _print_reply(build_welcome_reply())


__all__ = ["app"]
