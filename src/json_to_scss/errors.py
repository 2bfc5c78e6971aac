"""Exception hierarchy for json-to-scss."""

from __future__ import annotations


class JsonToScssError(Exception):
    """Base class for every error raised by this package."""


class ContractViolation(JsonToScssError, TypeError):
    """A value outside the JSON grammar was handed to the engine."""


class OptionsError(JsonToScssError, ValueError):
    """FormatOptions were built with an unknown dialect, quote style or depth."""


class LoadError(JsonToScssError):
    """A source file could not be read or parsed into a JSON value."""

    def __init__(self, path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
