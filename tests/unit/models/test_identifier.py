"""Tests for TestIdentifier parsing."""

import pytest

from testrun_cli.errors import InvalidTestIdentifierError
from testrun_cli.models.identifier import TestIdentifier


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("AppTests", TestIdentifier(target="AppTests")),
        (
            "AppTests/LoginTests",
            TestIdentifier(target="AppTests", class_name="LoginTests"),
        ),
        (
            "AppTests/LoginTests/testSuccess",
            TestIdentifier(
                target="AppTests", class_name="LoginTests", method_name="testSuccess"
            ),
        ),
        (
            "AppTests:LoginTests",
            TestIdentifier(target="AppTests", class_name="LoginTests"),
        ),
        (
            " AppTests / LoginTests ",
            TestIdentifier(target="AppTests", class_name="LoginTests"),
        ),
    ],
)
def test_parse(value: str, expected: TestIdentifier) -> None:
    """Parses one to three components."""
    assert TestIdentifier.parse(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "   ", "AppTests/", "/LoginTests", "A//b", "A/ /b", "A/B/c/d"],
)
def test_parse_rejects_malformed(value: str) -> None:
    """Rejects blank strings, empty components and too many components."""
    with pytest.raises(InvalidTestIdentifierError):
        TestIdentifier.parse(value)


def test_str_uses_slash_separator() -> None:
    """Canonical string form always uses slashes."""
    identifier = TestIdentifier.parse("AppTests:LoginTests:testSuccess")

    assert str(identifier) == "AppTests/LoginTests/testSuccess"


def test_structural_equality_and_hash() -> None:
    """Identifiers with the same components collapse in a set."""
    identifiers = {
        TestIdentifier.parse("AppTests/LoginTests"),
        TestIdentifier.parse("AppTests:LoginTests"),
        TestIdentifier(target="AppTests", class_name="LoginTests"),
    }

    assert len(identifiers) == 1
    assert TestIdentifier.parse("AppTests") != TestIdentifier.parse("apptests")
