"""treetrap extract command - extract TRAP files for source files."""

from pathlib import Path

import click

from treetrap.config import load_config
from treetrap.core.errors import ConfigError, ExtractionError, SchemaError
from treetrap.core.logging import configure_logging, get_logger
from treetrap.core.progress import pluralize, progress, status
from treetrap.extraction import Extractor, load_language
from treetrap.schema import load_node_types
from treetrap.trap.writer import trap_path_for, write_trap

log = get_logger("cli.extract")


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--language", "-l", required=True, help="Grammar name, e.g. ruby or python")
@click.option(
    "--node-types",
    "node_types",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="tree-sitter node-types.json for the grammar",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for TRAP files (default: output.trap_dir from config)",
)
@click.option("--gzip", "use_gzip", is_flag=True, help="Write gzip-compressed TRAP files")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: ./treetrap.yaml if present)",
)
@click.pass_context
def extract_command(
    ctx: click.Context,
    files: tuple[Path, ...],
    language: str,
    node_types: Path,
    output_dir: Path | None,
    use_gzip: bool,
    config_path: Path | None,
) -> None:
    """Extract FILES into TRAP fact files.

    Structural diagnostics are printed as 'error: PATH:ROW: MESSAGE' and do
    not fail the run. A file that cannot be read or decoded is skipped and
    makes the command exit with status 1, as does a TRAP file that cannot be
    written or that another input already maps to.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)

    try:
        entries = load_node_types(node_types)
        extractor = Extractor(load_language(language), entries, config.extractor)
    except (SchemaError, ExtractionError) as e:
        raise click.ClickException(str(e)) from e

    trap_dir = output_dir or Path(config.output.trap_dir)
    compression = "gzip" if use_gzip else config.output.compression

    failed = 0
    written = 0
    diagnostics = 0
    targets: dict[Path, str] = {}
    for path in progress(list(files), desc="Extracting"):
        try:
            result = extractor.extract(path)
        except ExtractionError as e:
            failed += 1
            log.error("extract_failed", path=str(path), error=e.error_name)
            click.echo(f"error: {e}", err=True)
            continue
        for diagnostic in result.diagnostics:
            click.echo(str(diagnostic), err=True)
        diagnostics += len(result.diagnostics)
        target = trap_path_for(result.path, trap_dir, compression)
        if target in targets:
            failed += 1
            log.error("trap_target_conflict", path=result.path, target=str(target))
            click.echo(
                f"error: {result.path}: TRAP file {target} "
                f"already written for {targets[target]}",
                err=True,
            )
            continue
        try:
            write_trap(result.program, result.path, trap_dir, compression)
        except OSError as e:
            failed += 1
            log.error("trap_write_failed", path=result.path, error=str(e))
            click.echo(f"error: {result.path}: cannot write TRAP file: {e}", err=True)
            continue
        targets[target] = result.path
        written += 1

    status(
        f"Wrote {pluralize(written, 'TRAP file')} to {trap_dir} "
        f"({pluralize(diagnostics, 'diagnostic')})",
        style="success" if not failed else "warning",
    )
    if failed:
        status(f"{pluralize(failed, 'file')} failed", style="error")
        ctx.exit(1)
