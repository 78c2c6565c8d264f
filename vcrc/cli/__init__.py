"""VCRC command-line interface package."""

from vcrc.cli.main import cli, main

__all__ = ["cli", "main"]
