"""JSON API to play Othello against the computer."""

from .app import create_app

__all__ = ["create_app"]
