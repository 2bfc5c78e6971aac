"""Classified value cases produced by the normalizer, and the output dialects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


# ---------------------------------------------------------------------------
# Dialect
# ---------------------------------------------------------------------------

class Dialect(Enum):
    BLOCK = "block"              # .scss
    INDENTATION = "indentation"  # .sass

    @property
    def extension(self) -> str:
        return ".scss" if self is Dialect.BLOCK else ".sass"


# ---------------------------------------------------------------------------
# VNull / VEmptyString: singletons
# ---------------------------------------------------------------------------

class _NullType:
    """JSON ``null``."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VNull"

    def __bool__(self) -> bool:
        return False


class _EmptyStringType:
    """The ``""`` string, quoted according to ``empty_string_quote``."""

    _instance: _EmptyStringType | None = None

    def __new__(cls) -> _EmptyStringType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VEmptyString"

    def __bool__(self) -> bool:
        return False


VNull = _NullType()
VEmptyString = _EmptyStringType()


# ---------------------------------------------------------------------------
# Value cases
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VBool:
    value: bool


@dataclass(slots=True)
class VNumber:
    value: int | float


@dataclass(slots=True)
class VString:
    value: str  # never empty


@dataclass(slots=True)
class VList:
    items: list[Any]  # raw, not yet classified


@dataclass(slots=True)
class VMap:
    entries: dict[str, Any]  # raw values, insertion order kept


Node = Union[_NullType, VBool, VNumber, _EmptyStringType, VString, VList, VMap]

SCALARS = (_NullType, VBool, VNumber, _EmptyStringType, VString)
