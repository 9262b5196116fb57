"""Public API functions for json-structural-diff.

This module provides the user-facing functions: diff, are_identical and
diff_files. Each call creates a fresh StructuralDiffer to guarantee zero
global state mutation between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.differ import StructuralDiffer
from json_structural_diff.loader import load_document
from json_structural_diff.result import Difference

__all__ = ["are_identical", "diff", "diff_files"]


def diff(
    a: Any,
    b: Any,
    config: DiffConfig | None = None,
) -> Difference | None:
    """Return the first difference between two JSON values.

    Args:
        a:      First JSON value (dict, list, str, int, float, bool, None).
        b:      Second JSON value.
        config: Comparison options. Defaults to ``DiffConfig()`` when None.

    Returns:
        ``None`` when the values are structurally equal, otherwise the first
        ``Difference`` found.

    Raises:
        TypeMismatch: Values at the same path have different kinds.
    """
    return StructuralDiffer(config=config).diff(a, b)


def are_identical(
    a: Any,
    b: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if ``diff(a, b, config)`` finds no difference.

    A kind mismatch still raises ``TypeMismatch`` rather than returning False.
    """
    return diff(a, b, config=config) is None


def diff_files(
    path_a: str | Path,
    path_b: str | Path,
    config: DiffConfig | None = None,
) -> Difference | None:
    """Load two JSON files and return the first difference between them.

    Both files are read and parsed before any comparison starts.

    Raises:
        MalformedInput: Either file is unreadable or not valid JSON.
        TypeMismatch:   Values at the same path have different kinds.
    """
    a = load_document(path_a)
    b = load_document(path_b)
    return diff(a, b, config=config)
