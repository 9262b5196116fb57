"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import DiffConfig, diff


@pytest.fixture(scope="session")
def assert_json_identical() -> Any:
    """Fixture that returns a callable structural JSON asserter.

    Usage in tests::

        def test_fixture(assert_json_identical):
            assert_json_identical(load_actual(), {"user": {"id": 1}})

        def test_break(assert_json_identical):
            with pytest.raises(AssertionError, match=r"differ at /user/id"):
                assert_json_identical({"user": {"id": 1}}, {"user": {"id": 2}})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` on the first structural difference.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        Raises:
            AssertionError: With the JSON Pointer, the rendered difference
                and both documents when they differ.
            TypeMismatch: When values at the same path have different kinds.
        """
        difference = diff(actual, expected, config=config)
        if difference is not None:
            raise AssertionError(
                f"JSON documents differ at {difference.pointer or '<root>'}: "
                f"{difference.render()}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
