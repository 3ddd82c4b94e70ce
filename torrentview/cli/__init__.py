"""Command line interface."""

from __future__ import annotations

from torrentview.cli.main import cli, main

__all__ = ["cli", "main"]
