"""Difference dataclass describing the first divergence between two documents.

A comparison returns either a ``Difference`` or ``None`` (no difference).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["Difference", "DifferenceReason"]


class DifferenceReason(StrEnum):
    """Why the leaf of a Difference diverged.

    - VALUE_MISMATCH: two primitives of the same kind are unequal.
    - MISSING_IN_B:   ``a`` has a property (or element) that ``b`` lacks.
    - MISSING_IN_A:   ``b`` has a property (or element) that ``a`` lacks.
    """

    VALUE_MISMATCH = auto()
    MISSING_IN_B = auto()
    MISSING_IN_A = auto()


def _escape_pointer_token(token: str) -> str:
    # RFC 6901: "~" must be escaped before "/"
    return token.replace("~", "~0").replace("/", "~1")


@dataclass(frozen=True, slots=True)
class Difference:
    """The first divergence found between two JSON values.

    Attributes:
        path:   Key segments from the root to the container holding the
                divergence.  Empty when the roots themselves differ.
        detail: Leaf message, e.g. ``"(1 != 2)"`` or
                ``"(a has property b but not b)"``.
        reason: Category of the leaf divergence.
    """

    path: tuple[str, ...]
    detail: str
    reason: DifferenceReason = DifferenceReason.VALUE_MISMATCH

    @property
    def pointer(self) -> str:
        """JSON Pointer (RFC 6901) for ``path``; ``""`` for the root."""
        return "".join(f"/{_escape_pointer_token(str(seg))}" for seg in self.path)

    def render(self) -> str:
        """Nested brace form: ``{x:{y:(1 != 2)}}``."""
        opening = "".join(f"{{{segment}:" for segment in self.path)
        closing = "}" * len(self.path)
        return f"{opening}{self.detail}{closing}"

    def __str__(self) -> str:
        return self.render()
