"""Write TRAP programs to disk, one file per extracted source file."""

from __future__ import annotations

import gzip
import os
from pathlib import Path, PurePath

from treetrap.config.constants import GZIP_SUFFIX, TRAP_SUFFIX
from treetrap.config.models import Compression
from treetrap.trap.facts import Program


def trap_path_for(source_path: str, trap_dir: Path, compression: Compression = "none") -> Path:
    """Mirror ``source_path`` under ``trap_dir`` with a ``.trap`` suffix.

    The path is normalised first, so ``a/../b.rb`` lands at
    ``<trap_dir>/b.rb.trap``. A relative path that still climbs out of the
    working directory is made absolute. Absolute paths lose their anchor, so
    ``/src/a.rb`` lands at ``<trap_dir>/src/a.rb.trap``.
    """
    pure = PurePath(os.path.normpath(source_path))
    if ".." in pure.parts:
        pure = Path(source_path).resolve()
    parts = [p for p in pure.parts if p != pure.anchor]
    if not parts:
        raise ValueError(f"Cannot derive a TRAP file name from {source_path!r}")
    suffix = TRAP_SUFFIX + (GZIP_SUFFIX if compression == "gzip" else "")
    relative = Path(*parts)
    return trap_dir / relative.with_name(relative.name + suffix)


def write_trap(
    program: Program,
    source_path: str,
    trap_dir: Path,
    compression: Compression = "none",
) -> Path:
    """Write ``program`` and return the path of the TRAP file."""
    target = trap_path_for(source_path, trap_dir, compression)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = program.render().encode("utf-8")
    if compression == "gzip":
        with gzip.open(target, "wb") as f:
            f.write(data)
    else:
        target.write_bytes(data)
    return target
