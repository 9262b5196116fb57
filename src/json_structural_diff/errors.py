"""Exception hierarchy for json-structural-diff.

Every error here is fatal to the comparison that raised it: nothing in the
package catches and continues.
"""

from __future__ import annotations

from pathlib import Path

from json_structural_diff.algorithm.kinds import ValueKind

__all__ = ["DiffError", "MalformedInput", "TypeMismatch"]


class DiffError(Exception):
    """Base class for all json-structural-diff errors."""


class TypeMismatch(DiffError, TypeError):
    """Two compared values are of different fundamental kinds.

    Attributes:
        kind:       Kind of the value on the ``a`` side.
        other_kind: Kind of the value on the ``b`` side.
        path:       Key segments from the root to the mismatching values.
    """

    def __init__(
        self,
        kind: ValueKind,
        other_kind: ValueKind,
        path: tuple[str, ...] = (),
    ) -> None:
        self.kind = kind
        self.other_kind = other_kind
        self.path = path
        where = "/".join(path) if path else "<root>"
        super().__init__(f"{kind} (b is {other_kind}, at {where})")


class MalformedInput(DiffError, ValueError):
    """A document could not be read or is not valid JSON.

    Attributes:
        path: The file that failed to load.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")
