"""JSON structural diff - report the first path where two documents diverge."""

from __future__ import annotations

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffConfig
from json_structural_diff.algorithm.kinds import ValueKind
from json_structural_diff.api import are_identical, diff, diff_files
from json_structural_diff.differ import StructuralDiffer
from json_structural_diff.errors import DiffError, MalformedInput, TypeMismatch
from json_structural_diff.loader import load_document
from json_structural_diff.result import Difference, DifferenceReason

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayComparisonMode",
    "DiffConfig",
    "DiffError",
    "Difference",
    "DifferenceReason",
    "MalformedInput",
    "StructuralDiffer",
    "TypeMismatch",
    "ValueKind",
    "are_identical",
    "diff",
    "diff_files",
    "load_document",
]
