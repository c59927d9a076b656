"""
CLI module for superpowers.

Provides the command-line interface using Click.
"""

from superpowers.cli.main import cli, main

__all__ = ["main", "cli"]
