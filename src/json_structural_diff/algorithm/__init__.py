"""Algorithm building blocks: configuration, value kinds, leaf rendering."""

from __future__ import annotations

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffConfig
from json_structural_diff.algorithm.kinds import ValueKind, classify, own_keys
from json_structural_diff.algorithm.scalars import format_scalar

__all__ = [
    "ArrayComparisonMode",
    "DiffConfig",
    "ValueKind",
    "classify",
    "format_scalar",
    "own_keys",
]
