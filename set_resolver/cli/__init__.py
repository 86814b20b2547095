"""Command-line interface for set-resolver."""

from .main import main

__all__ = ["main"]
