"""treetrap schema command - summarize a node-types.json schema."""

import json
from pathlib import Path

import click

from treetrap.core.errors import SchemaError
from treetrap.schema import TableEntry, TableStorage, UnionEntry, load_node_types
from treetrap.trap.escape import escape_name, node_type_name


@click.command()
@click.option(
    "--node-types",
    "node_types",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="tree-sitter node-types.json for the grammar",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def schema_command(node_types: Path, as_json: bool) -> None:
    """Show the tables and unions derived from a grammar's node types."""
    try:
        entries = load_node_types(node_types)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e

    tables = [e for e in entries if isinstance(e, TableEntry)]
    unions = [e for e in entries if isinstance(e, UnionEntry)]

    if as_json:
        click.echo(
            json.dumps(
                {
                    "tables": {
                        escape_name(node_type_name(t.type_name.kind, t.type_name.named)): [
                            {
                                "field": f.display_name,
                                "storage": "table"
                                if isinstance(f.storage, TableStorage)
                                else "column",
                            }
                            for f in t.fields
                        ]
                        for t in tables
                    },
                    "unions": {
                        u.type_name.kind: sorted(m.kind for m in u.members) for u in unions
                    },
                },
                indent=2,
            )
        )
        return

    click.echo(f"Tables: {len(tables)}")
    for t in tables:
        name = escape_name(node_type_name(t.type_name.kind, t.type_name.named))
        if not t.fields:
            click.echo(f"  {name} (token)")
            continue
        click.echo(f"  {name}")
        for f in t.fields:
            storage = "table" if isinstance(f.storage, TableStorage) else "column"
            click.echo(f"    {f.display_name}: {storage}")
    click.echo(f"Unions: {len(unions)}")
    for u in unions:
        members = ", ".join(sorted(str(m) for m in u.members))
        click.echo(f"  {u.type_name.kind} = {members}")
