"""Command-line entry points.

- ``json-diff FILE_A FILE_B``: print the first difference between two files
  and, when they differ, both documents for manual inspection.
- ``json-diff-roundtrip DIRECTORY``: diff every ``X.json`` against its
  ``X.json.out`` dump.

Exit status is 0 when nothing differs and 1 otherwise.  Kind mismatches and
unreadable or invalid JSON are not caught; they abort with a traceback.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffConfig
from json_structural_diff.differ import StructuralDiffer
from json_structural_diff.loader import dump_document, load_document
from json_structural_diff.result import Difference
from json_structural_diff.roundtrip import DEFAULT_SUFFIX, RoundTripChecker

__all__ = ["main", "roundtrip_main"]

SEPARATOR = "-" * 22
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_array_mode_option = click.option(
    "--array-mode",
    type=click.Choice([m.value for m in ArrayComparisonMode]),
    default=ArrayComparisonMode.INDEXED.value,
    show_default=True,
    help="Compare arrays as index-keyed objects or positionally.",
)
_null_option = click.option(
    "--null-as-object",
    is_flag=True,
    help="Treat null as an object with no properties.",
)
_verbose_option = click.option(
    "-v", "--verbose", is_flag=True, help="Log debug output to stderr."
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def _verdict(difference: Difference | None) -> str:
    return "false" if difference is None else difference.render()


def _echo_header(path_a: Path, path_b: Path) -> None:
    click.echo(SEPARATOR)
    click.echo(f"{path_a} compared to {path_b}")


def _echo_verdict(difference: Difference | None) -> None:
    click.echo(f"files differ?:{_verdict(difference)}")


@click.command(name="json-diff")
@click.argument("file_a", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("file_b", type=click.Path(dir_okay=False, path_type=Path))
@_array_mode_option
@_null_option
@_verbose_option
def main(
    file_a: Path,
    file_b: Path,
    array_mode: str,
    null_as_object: bool,
    verbose: bool,
) -> None:
    """Report the first path at which FILE_A and FILE_B diverge."""
    _configure_logging(verbose)
    config = DiffConfig(
        array_mode=ArrayComparisonMode(array_mode), null_as_object=null_as_object
    )

    # Header first, so a fatal load or kind error still names the files.
    _echo_header(file_a, file_b)
    a = load_document(file_a)
    b = load_document(file_b)
    difference = StructuralDiffer(config=config).diff(a, b)

    _echo_verdict(difference)
    if difference is None:
        return

    click.echo(SEPARATOR)
    click.echo(dump_document(a))
    click.echo(SEPARATOR)
    click.echo(dump_document(b))
    click.echo(SEPARATOR)
    raise SystemExit(1)


@click.command(name="json-diff-roundtrip")
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--suffix",
    default=DEFAULT_SUFFIX,
    show_default=True,
    help="Suffix appended to a fixture name to find its dump.",
)
@_array_mode_option
@_null_option
@_verbose_option
def roundtrip_main(
    directory: Path,
    suffix: str,
    array_mode: str,
    null_as_object: bool,
    verbose: bool,
) -> None:
    """Diff every X.json in DIRECTORY against its X.json.out dump."""
    _configure_logging(verbose)
    config = DiffConfig(
        array_mode=ArrayComparisonMode(array_mode), null_as_object=null_as_object
    )

    failures = 0
    for outcome in RoundTripChecker(config=config, suffix=suffix).check(directory):
        _echo_header(outcome.source, outcome.output)
        _echo_verdict(outcome.difference)
        failures += outcome.differs

    if failures:
        click.echo(SEPARATOR)
        click.echo(f"{failures} round trip(s) differ")
        raise SystemExit(1)
