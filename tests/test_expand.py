from __future__ import annotations

import pytest

from envlayers.parser.expand import expand_variables

VARS = {"A": "x", "HOME_DIR": "/home/me"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("$A", "x"),
        ("${A}", "x"),
        ("${A}b", "xb"),
        ("$Ab", "xb"),
        ("${HOME_DIR}/bin", "/home/me/bin"),
        ("a${MISSING}b", "ab"),
    ],
)
def test_expands_known_and_unknown_names(value: str, expected: str) -> None:
    assert expand_variables(value, VARS) == expected


def test_escaped_reference_is_not_expanded() -> None:
    assert expand_variables(r"\${A}", VARS) == "${A}"
    assert expand_variables(r"\$A", VARS) == "$A"


def test_subshell_syntax_is_not_expanded() -> None:
    assert expand_variables("$(cmd)", VARS) == "(cmd)"
    assert expand_variables("$(A)", VARS) == "(A)"


def test_non_references_pass_through() -> None:
    assert expand_variables("$lower", VARS) == "$lower"
    assert expand_variables("cost: $", VARS) == "cost: $"
    assert expand_variables("${}", VARS) == "${}"
