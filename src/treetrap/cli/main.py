"""treetrap CLI."""

import click

from treetrap.cli.extract import extract_command
from treetrap.cli.schema import schema_command
from treetrap.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="treetrap")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """treetrap - turn tree-sitter syntax trees into TRAP fact files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(extract_command, name="extract")
cli.add_command(schema_command, name="schema")


if __name__ == "__main__":
    cli()
