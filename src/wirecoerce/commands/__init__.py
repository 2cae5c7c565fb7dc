"""Subcommand modules for wirecoerce.

Provides register_commands() which defers imports so ``--help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from wirecoerce.commands.decode import decode
    from wirecoerce.commands.models import models

    cli.add_command(decode)
    cli.add_command(models)
