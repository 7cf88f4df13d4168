"""Root CLI group for citectl with global flags and command registration."""

from __future__ import annotations

import click

from citectl import __version__
from citectl.commands import register_commands
from citectl.commands._base import CiteGroup
from citectl.commands._context import AppContext
from citectl.config.settings import CiteSettings


@click.group(
    cls=CiteGroup,
    invoke_without_command=True,
    examples="""\
  citectl evaluate
  citectl evaluate --speed 61 --limit 35
  citectl --json evaluate --birth-date 1990-10-17 --today 2026-10-17
  citectl -q evaluate --speed 66 --limit 65
  citectl laws""",
)
@click.version_option(version=__version__, prog_name="citectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Citation lines only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """citectl — traffic citation evaluation."""
    settings = CiteSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
