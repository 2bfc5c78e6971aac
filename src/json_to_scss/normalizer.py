"""Value Normalizer: classify a raw JSON value into one serialization case."""

from __future__ import annotations

import math
from collections.abc import Mapping

from .errors import ContractViolation
from .model import Node, VBool, VEmptyString, VList, VMap, VNull, VNumber, VString


def classify(value) -> Node:
    """Return the serialization case for *value*.

    - ``None``              → VNull
    - ``True`` / ``False``  → VBool (checked before numbers)
    - ``int`` / ``float``   → VNumber (NaN and infinities are rejected)
    - ``""``                → VEmptyString
    - other ``str``         → VString
    - ``list`` / ``tuple``  → VList (items left raw)
    - Mapping with str keys → VMap (entries left raw, order kept)

    Anything else is not a JSON value and raises ContractViolation.
    """
    if value is None:
        return VNull
    if isinstance(value, bool):
        return VBool(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ContractViolation(f"{value!r} is not a JSON number")
        return VNumber(value)
    if isinstance(value, str):
        if value == "":
            return VEmptyString
        return VString(value)
    if isinstance(value, (list, tuple)):
        return VList(list(value))
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise ContractViolation(f"mapping key {key!r} is not a string")
        return VMap(dict(value))
    raise ContractViolation(f"{type(value).__name__} value {value!r} is not a JSON value")
