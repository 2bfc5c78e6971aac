"""FormatOptions: the immutable configuration record read once per conversion."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import OptionsError
from .model import Dialect


QUOTES: dict[str, str] = {
    "double": '"',
    "single": "'",
}

# Defaults that depend on the dialect: (suffix, indent_base_depth)
_DIALECT_DEFAULTS: dict[Dialect, tuple[str, int]] = {
    Dialect.BLOCK: (";", 1),
    Dialect.INDENTATION: ("", 0),
}


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Formatting options for one conversion.

    ``suffix`` and ``indent_base_depth`` default to ``None`` and are resolved
    from the dialect: ``";"`` / ``1`` for the block dialect, ``""`` / ``0`` for
    the indentation dialect.  ``dialect`` also accepts its string value.
    """

    prefix: str = ""
    suffix: str | None = None
    empty_string_quote: str = "double"
    indent_unit: str = "  "
    indent_base_depth: int | None = None
    strip_leading_underscore: bool = False
    dialect: Dialect = Dialect.BLOCK

    def __post_init__(self) -> None:
        dialect = _coerce_dialect(self.dialect)
        object.__setattr__(self, "dialect", dialect)

        if self.empty_string_quote not in QUOTES:
            raise OptionsError(
                f"unknown empty string quote {self.empty_string_quote!r} "
                f"(expected one of {', '.join(QUOTES)})"
            )

        default_suffix, default_depth = _DIALECT_DEFAULTS[dialect]
        if self.suffix is None:
            object.__setattr__(self, "suffix", default_suffix)
        if self.indent_base_depth is None:
            object.__setattr__(self, "indent_base_depth", default_depth)
        elif isinstance(self.indent_base_depth, bool) or not isinstance(self.indent_base_depth, int):
            raise OptionsError(f"indent_base_depth must be an int, got {self.indent_base_depth!r}")
        elif self.indent_base_depth < 0:
            raise OptionsError(f"indent_base_depth must be >= 0, got {self.indent_base_depth}")

    @property
    def empty_string(self) -> str:
        """Literal text of an empty string value, e.g. ``""`` or ``''``."""
        quote = QUOTES[self.empty_string_quote]
        return quote + quote


def _coerce_dialect(value) -> Dialect:
    if isinstance(value, Dialect):
        return value
    try:
        return Dialect(value)
    except ValueError:
        pass
    # File extensions are accepted too: ".scss", "sass", ...
    if isinstance(value, str):
        for dialect in Dialect:
            if value.lower().lstrip(".") == dialect.extension.lstrip("."):
                return dialect
    raise OptionsError(f"unknown dialect {value!r}")
