"""Typer CLI application."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from reprompt.core.errors import (
    CriticalFailureError,
    RepromptError,
    SnapshotError,
    ValidationError,
    VerifyError,
    WriteError,
)
from reprompt.core.settings import Settings
from reprompt.io.clipboard import select_backend
from reprompt.session import run_session

SUCCESS_MARK = "✨"


def configure_logging(level: str, console: Console) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="reprompt",
        help="Strip terminal UI borders, escape codes and mojibake from the clipboard.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def sanitize() -> None:
        """Clean the clipboard in place.

        Always exits with status 0; problems are reported on stderr.
        """
        try:
            settings = Settings()
            configure_logging(settings.log_level, console)
            resource = select_backend(settings.backend)
            result = run_session(resource, settings.validation_policy())
        except SnapshotError as exc:
            console.print(f"[dim]Clipboard unavailable: {escape(str(exc))}[/]")
            return
        except ValidationError as exc:
            console.print(f"[yellow]Left clipboard untouched: {escape(str(exc))}[/]")
            return
        except (WriteError, VerifyError) as exc:
            console.print(f"[yellow]Write aborted, original clipboard restored: {escape(str(exc))}[/]")
            return
        except CriticalFailureError as exc:
            console.print(f"[bold red]CRITICAL: clipboard may be corrupted: {escape(str(exc))}[/]")
            return
        except RepromptError as exc:
            console.print(f"[red]Error: {escape(str(exc))}[/]")
            return
        except Exception as exc:
            console.print(f"[red]Unexpected error: {escape(repr(exc))}[/]")
            return

        if result.changed:
            print(SUCCESS_MARK)

    return app
