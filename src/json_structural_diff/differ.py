"""StructuralDiffer: first-difference search over two JSON values.

Architecture:
- ``diff()`` walks both documents depth-first with an explicit stack of child
  iterators, so nesting depth is bounded by memory rather than by the
  interpreter's recursion limit.
- Each visited pair is classified; differing kinds raise ``TypeMismatch``.
- Primitives compare by strict value equality.
- Objects first compare their key sets (``a``'s extra keys before ``b``'s),
  then descend into values in ``a``'s key order.  The first ``Difference``
  found is returned with the full key path; nothing is aggregated.
- Arrays compare as objects keyed by index strings unless the config asks
  for POSITIONAL mode, in which case lengths are checked and elements are
  compared pairwise.

The differ holds nothing but its config, so a single instance may be reused
for any number of comparisons.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.algorithm.kinds import (
    CONTAINER_KINDS,
    ValueKind,
    classify,
    own_keys,
)
from json_structural_diff.algorithm.scalars import format_scalar
from json_structural_diff.errors import TypeMismatch
from json_structural_diff.result import Difference, DifferenceReason

__all__ = ["StructuralDiffer"]

logger = logging.getLogger(__name__)

# (key, value in a, value in b) for each child pair still to visit.
_Children = Iterator[tuple[str, Any, Any]]


class StructuralDiffer:
    """Finds the first path at which two JSON values diverge.

    Example::

        from json_structural_diff.differ import StructuralDiffer

        differ = StructuralDiffer()
        found = differ.diff({"x": {"y": 1}}, {"x": {"y": 2}})
        print(found)          # {x:{y:(1 != 2)}}
        print(found.pointer)  # /x/y
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the differ.

        Args:
            config: Comparison options.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, a: Any, b: Any) -> Difference | None:
        """Compare two JSON values and return the first difference.

        Args:
            a: First JSON value (dict, list, str, int, float, bool, None).
            b: Second JSON value.

        Returns:
            ``None`` when the values are structurally equal, otherwise the
            first ``Difference`` found.

        Raises:
            TypeMismatch: Two values at the same path have different kinds.
                Aborts the whole comparison.
            TypeError: A value is not a JSON type.
        """
        found = self._walk(a, b)
        if found is not None:
            logger.debug("first difference at %s: %s", found.path, found.detail)
        return found

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _walk(self, a: Any, b: Any) -> Difference | None:
        # Invariant: while reading from pending[-1], len(path) == len(pending) - 1.
        path: list[str] = []
        visited = self._visit(a, b, path)
        if visited is None or isinstance(visited, Difference):
            return visited

        pending: list[_Children] = [visited]
        while pending:
            step = next(pending[-1], None)
            if step is None:
                pending.pop()
                if pending:
                    path.pop()
                continue

            key, item_a, item_b = step
            path.append(key)
            visited = self._visit(item_a, item_b, path)
            if isinstance(visited, Difference):
                return visited
            if visited is None:
                path.pop()
            else:
                pending.append(visited)
        return None

    def _visit(
        self, a: Any, b: Any, path: list[str]
    ) -> Difference | _Children | None:
        """Compare one pair; return a leaf Difference or its children to visit."""
        kind_a = classify(a, self._config)
        kind_b = classify(b, self._config)
        if kind_a is not kind_b:
            logger.debug("type mismatch at %s: %s vs %s", path, kind_a, kind_b)
            raise TypeMismatch(kind_a, kind_b, tuple(path))

        if kind_a is ValueKind.ARRAY:
            return self._visit_array(a, b, path)
        if kind_a in CONTAINER_KINDS:
            return self._visit_object(a, b, path)
        if a == b:
            return None
        return Difference(
            path=tuple(path),
            detail=f"({format_scalar(a)} != {format_scalar(b)})",
            reason=DifferenceReason.VALUE_MISMATCH,
        )

    def _visit_object(
        self, a: Any, b: Any, path: list[str]
    ) -> Difference | _Children:
        members_a = own_keys(a)
        members_b = own_keys(b)

        # Property-set asymmetry: a's extra keys are reported before b's.
        for key in members_a:
            if key not in members_b:
                return Difference(
                    path=tuple(path),
                    detail=f"(a has property {key} but not b)",
                    reason=DifferenceReason.MISSING_IN_B,
                )
        for key in members_b:
            if key not in members_a:
                return Difference(
                    path=tuple(path),
                    detail=f"(b has property {key} but not a)",
                    reason=DifferenceReason.MISSING_IN_A,
                )

        return ((key, value, members_b[key]) for key, value in members_a.items())

    def _visit_array(
        self, a: list[Any], b: list[Any], path: list[str]
    ) -> Difference | _Children:
        if len(a) > len(b):
            return Difference(
                path=tuple(path),
                detail=f"(a has element {len(b)} but not b)",
                reason=DifferenceReason.MISSING_IN_B,
            )
        if len(b) > len(a):
            return Difference(
                path=tuple(path),
                detail=f"(b has element {len(a)} but not a)",
                reason=DifferenceReason.MISSING_IN_A,
            )

        return (
            (str(idx), item_a, item_b)
            for idx, (item_a, item_b) in enumerate(zip(a, b, strict=True))
        )
