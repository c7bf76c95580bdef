"""CLI commands for ask-devoxx-engine."""

import typer

from ask_devoxx_engine.cli.api import app as api_app
from ask_devoxx_engine.cli.skill import app as skill_app

main_app = typer.Typer(
    name="ask-devoxx",
    help="Ask Devoxx skill backend CLI",
    no_args_is_help=True,
)
main_app.add_typer(skill_app, name="skill")
main_app.add_typer(api_app, name="api")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
