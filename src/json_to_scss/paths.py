"""Source resolution and destination path derivation."""

from __future__ import annotations

import glob
import os
from pathlib import Path

from .model import Dialect

SOURCE_EXTENSIONS = frozenset({".json", ".js"})
STYLESHEET_EXTENSIONS = frozenset({".scss", ".sass"})


def resolve_sources(pattern: str, cwd: str | Path | None = None) -> list[Path]:
    """Expand *pattern* (a path or glob, ``**`` allowed) relative to *cwd*.

    Only existing files are returned, sorted.  Directories are ignored.
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    full = os.path.join(base, os.path.expanduser(pattern))
    matches = glob.glob(full, recursive=True)
    return sorted(Path(m).resolve() for m in matches if os.path.isfile(m))


def is_supported(path: str | Path) -> bool:
    """True for ``.json`` and ``.js`` files (case-insensitive)."""
    return Path(path).suffix.lower() in SOURCE_EXTENSIONS


def correct_extension(path: str | Path, dialect: Dialect, forced: bool = False) -> Path:
    """Give *path* a stylesheet extension.

    A ``.scss`` or ``.sass`` path is kept unless *forced* requires the
    dialect's own extension; anything else gets the dialect's extension.

    - ``colors``                       → ``colors.scss``
    - ``colors.json``                  → ``colors.scss``
    - ``colors.sass`` (block)          → kept as-is
    - ``colors.scss`` (indentation, forced) → ``colors.sass``
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in STYLESHEET_EXTENSIONS and (not forced or suffix == dialect.extension):
        return path
    if not path.suffix:
        return path.with_name(path.name + dialect.extension)
    return path.with_suffix(dialect.extension)


def destination_paths(
    sources: list[Path],
    destination: str | Path | None,
    dialect: Dialect,
    cwd: str | Path | None = None,
    forced: bool = False,
) -> list[Path]:
    """Pair every source with the path its converted text is written to.

    - no destination: next to the source, extension corrected;
    - an existing directory, or a path without extension: inside that
      directory, named after the source;
    - a file path and a single source: that file, extension corrected;
    - a file path and several sources: the path minus its extension is
      used as the directory.

    *forced* is passed on to :func:`correct_extension`.
    """
    if not destination:
        return [correct_extension(s, dialect, forced) for s in sources]

    base = Path.cwd() if cwd is None else Path(cwd)
    dest = (base / Path(destination).expanduser()).resolve()

    if dest.is_dir() or not dest.suffix:
        directory = dest
    elif len(sources) == 1:
        return [correct_extension(dest, dialect, forced)]
    else:
        directory = dest.with_suffix("")

    return [directory / correct_extension(Path(s).name, dialect, forced) for s in sources]
