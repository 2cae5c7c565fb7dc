"""Root CLI group for wirecoerce with global flags and command registration."""

from __future__ import annotations

import click

from wirecoerce import __version__
from wirecoerce.commands import register_commands
from wirecoerce.commands._context import AppContext
from wirecoerce.config.settings import WireSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wirecoerce")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--strict", is_flag=True, help="Fail on shape mismatches instead of passing through.")
@click.option("--lenient", is_flag=True, help="Pass mismatched values through (overrides config).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    strict: bool,
    lenient: bool,
    config_path: str | None,
) -> None:
    """wirecoerce: decode access-control wire payloads into typed models."""
    settings = WireSettings.from_cli(
        config_path=config_path,
        strict=True if strict else (False if lenient else None),
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
