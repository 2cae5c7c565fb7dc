"""Command: list registered models or show one model's descriptor tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wirecoerce.commands._base import WireCommand

if TYPE_CHECKING:
    from wirecoerce.commands._context import AppContext


@click.command(
    cls=WireCommand,
    examples="""\
  wirecoerce models
  wirecoerce models authorization-request
  wirecoerce --json models get-relation-tuples-response""",
)
@click.argument("name", required=False)
@click.pass_obj
def models(app: AppContext, name: str | None) -> None:
    """List registered models, or describe model NAME."""
    svc = app.decode_service()
    app.emit(svc.describe(name) if name else svc.list_models())
