"""Command-line interface."""

from reprompt.cli.app import create_app

__all__ = ["create_app"]
