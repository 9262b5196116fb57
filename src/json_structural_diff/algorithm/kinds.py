"""ValueKind StrEnum and classify() for JSON value dispatch.

Every value the differ sees is mapped to exactly one ValueKind before it is
compared.  Two values of different kinds can never be compared; the differ
raises TypeMismatch instead.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffConfig

__all__ = ["CONTAINER_KINDS", "ValueKind", "classify", "own_keys"]


class ValueKind(StrEnum):
    """Enumeration of the fundamental kinds of a JSON value.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int or float, one JSON number type
    - STRING  -> "string"
    - OBJECT  -> "object"  : dict (and list / null depending on DiffConfig)
    - ARRAY   -> "array"   : list, only in POSITIONAL mode
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


CONTAINER_KINDS = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})


def classify(value: Any, config: DiffConfig) -> ValueKind:
    """Return the ValueKind of ``value`` under ``config``.

    Args:
        value:  Any JSON-decoded value.
        config: Decides how lists and None are classified.

    Returns:
        The ValueKind of ``value``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # CRITICAL: bool MUST be checked before int, bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, dict):
        return ValueKind.OBJECT

    if isinstance(value, (list, tuple)):
        if config.array_mode is ArrayComparisonMode.POSITIONAL:
            return ValueKind.ARRAY
        return ValueKind.OBJECT

    if value is None:
        return ValueKind.OBJECT if config.null_as_object else ValueKind.NULL

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def own_keys(value: Any) -> dict[str, Any]:
    """Return the keys a container explicitly stores, mapped to their values.

    Dicts map to themselves.  Lists and tuples are keyed by their decimal
    index strings.  None (only reachable as an object in ``null_as_object``
    mode) has no keys.
    """
    if isinstance(value, dict):
        return value
    if value is None:
        return {}
    return {str(idx): item for idx, item in enumerate(value)}
