"""Command: decode a JSON payload into a registered model."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from wirecoerce.commands._base import WireCommand
from wirecoerce.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from wirecoerce.commands._context import AppContext


@click.command(
    cls=WireCommand,
    examples="""\
  wirecoerce decode authorization-request request.json
  echo '{"scopes": ["read"]}' | wirecoerce decode authorization-request
  wirecoerce --strict decode relation-tuple tuple.json
  wirecoerce --json decode --many relation-tuple tuples.json""",
)
@click.argument("model")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--many", is_flag=True, help="Payload is a JSON array of records.")
@click.pass_obj
def decode(app: AppContext, model: str, source: TextIO, many: bool) -> None:
    """Decode JSON from SOURCE (default: stdin) as MODEL and print the record."""
    try:
        text = source.read()
    except (OSError, UnicodeDecodeError) as exc:
        app.emit(ServiceResult.failure("decode", ErrorCode.READ_FAILED, str(exc)))
        return
    app.emit(app.decode_service().decode_text(text, model, many=many))
