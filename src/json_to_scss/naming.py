"""Variable-name derivation from source file names."""

from __future__ import annotations

from pathlib import PurePath


def variable_name(path: str | PurePath, strip_leading_underscore: bool = False) -> str:
    """Return the Sass variable name for a source file.

    The base name with its last extension removed; with
    *strip_leading_underscore*, leading ``_`` characters are dropped too::

        variable_name("tokens/_colors.json")        → "_colors"
        variable_name("tokens/_colors.json", True)  → "colors"
    """
    name = PurePath(path).stem
    if strip_leading_underscore:
        name = name.lstrip("_")
    return name


def default_prefix(name: str) -> str:
    """``colors`` → ``$colors: ``"""
    return f"${name}: "
