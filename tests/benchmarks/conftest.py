"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 1000-key nested, 100-level deep.
Each tier provides an "identical" pair (full walk) and a "late" pair whose
only difference sits at the last key visited (worst case for early exit).
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def generate_nested_object(sections: int, leaves: int) -> dict[str, Any]:
    """Generate ``sections`` sub-objects of ``leaves`` fields each."""
    return {
        f"section_{s}": {
            f"field_{i}": {
                "values": [i, float(i) / 2, i % 2 == 0, None],
                "label": f"text_{i}",
            }
            for i in range(leaves)
        }
        for s in range(sections)
    }


def generate_deep_object(depth: int) -> dict[str, Any]:
    """Generate a single chain of ``depth`` nested objects."""
    doc: dict[str, Any] = {"leaf": "bottom"}
    for level in range(depth):
        doc = {"marker": level, f"level_{level}": doc}
    return doc


def _with_last_leaf_changed(doc: dict[str, Any]) -> dict[str, Any]:
    """Copy ``doc`` and change the value the differ visits last."""
    changed = copy.deepcopy(doc)
    node: Any = changed
    while True:
        last_key = list(node)[-1]
        if isinstance(node[last_key], dict):
            node = node[last_key]
            continue
        node[last_key] = "changed"
        return changed


@pytest.fixture(scope="session")
def pair_10key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_flat_object(10), generate_flat_object(10)


@pytest.fixture(scope="session")
def pair_10key_late() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_flat_object(10)
    return left, _with_last_leaf_changed(left)


@pytest.fixture(scope="session")
def pair_1000key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_nested_object(20, 50), generate_nested_object(20, 50)


@pytest.fixture(scope="session")
def pair_1000key_late() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_nested_object(20, 50)
    return left, _with_last_leaf_changed(left)


@pytest.fixture(scope="session")
def pair_deep_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_deep_object(100), generate_deep_object(100)


@pytest.fixture(scope="session")
def pair_deep_late() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_deep_object(100)
    return left, _with_last_leaf_changed(left)
