"""RoundTripChecker: compares parser fixtures against their re-serialised dumps.

A serializer under test reads ``name.json`` and writes its own rendering of
the parsed document next to it as ``name.json.out``.  The checker pairs each
fixture with its dump and diffs them, so a lossy parse or serialise step
shows up as the first path where the dump diverges from the fixture.

Fixtures without a dump are skipped: the harness only writes dumps for
documents it managed to parse.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.differ import StructuralDiffer
from json_structural_diff.loader import load_document
from json_structural_diff.result import Difference

__all__ = ["RoundTripChecker", "RoundTripOutcome", "find_roundtrip_pairs"]

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".out"


@dataclass(frozen=True, slots=True)
class RoundTripOutcome:
    """Result of diffing one fixture against its dump.

    Attributes:
        source:     The original ``*.json`` fixture.
        output:     The dump written by the serializer under test.
        difference: First difference, or None when the round trip is exact.
    """

    source: Path
    output: Path
    difference: Difference | None

    @property
    def differs(self) -> bool:
        return self.difference is not None


def find_roundtrip_pairs(
    directory: str | Path, suffix: str = DEFAULT_SUFFIX
) -> Iterator[tuple[Path, Path]]:
    """Yield ``(fixture, dump)`` pairs from ``directory`` in name order."""
    directory = Path(directory)
    for source in sorted(directory.glob("*.json")):
        output = source.with_name(source.name + suffix)
        if output.is_file():
            yield source, output
        else:
            logger.debug("no %s dump for %s, skipping", suffix, source.name)


class RoundTripChecker:
    """Diffs every fixture/dump pair found in a directory.

    A single ``StructuralDiffer`` is reused for all pairs.  Errors are not
    caught: a malformed dump or a kind mismatch aborts the whole run.
    """

    def __init__(
        self, config: DiffConfig | None = None, suffix: str = DEFAULT_SUFFIX
    ) -> None:
        if not suffix:
            msg = "suffix must be a non-empty string"
            raise ValueError(msg)
        self._differ = StructuralDiffer(config=config)
        self._suffix = suffix

    def check(self, directory: str | Path) -> Iterator[RoundTripOutcome]:
        """Lazily diff each pair in ``directory``, yielding one outcome per pair."""
        for source, output in find_roundtrip_pairs(directory, self._suffix):
            difference = self._differ.diff(
                load_document(source), load_document(output)
            )
            yield RoundTripOutcome(source=source, output=output, difference=difference)
