"""DiffConfig and ArrayComparisonMode for structural diff configuration.

DiffConfig is a frozen (immutable) dataclass holding the comparison
options.  ArrayComparisonMode selects how arrays are compared: as objects
keyed by index strings, or as their own positional kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ArrayComparisonMode", "DiffConfig"]


class ArrayComparisonMode(StrEnum):
    """How to compare JSON arrays.

    - INDEXED:    Arrays share the object code path, keyed by "0", "1", ...
                  ``[1]`` and ``{"0": 1}`` compare equal.
    - POSITIONAL: Arrays are a distinct kind; array vs object is a type
                  mismatch and length differences are reported per element.
    """

    INDEXED = auto()
    POSITIONAL = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for StructuralDiffer.

    Attributes:
        array_mode: How arrays are compared.  Default INDEXED.
        null_as_object: When True, JSON null is classified as an object with
            no keys, so ``null`` equals ``{}``.  Default False (null is its
            own kind and ``null`` vs ``{}`` is a type mismatch).
    """

    array_mode: ArrayComparisonMode = ArrayComparisonMode.INDEXED
    null_as_object: bool = False

    def __post_init__(self) -> None:
        try:
            mode = ArrayComparisonMode(self.array_mode)
        except ValueError:
            choices = ", ".join(m.value for m in ArrayComparisonMode)
            msg = f"array_mode must be one of {choices}, got {self.array_mode!r}"
            raise ValueError(msg) from None
        # Normalise plain strings to the enum member.
        object.__setattr__(self, "array_mode", mode)
        if not isinstance(self.null_as_object, bool):
            msg = f"null_as_object must be a bool, got {self.null_as_object!r}"
            raise ValueError(msg)
