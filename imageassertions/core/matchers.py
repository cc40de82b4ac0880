"""Comparison of a verdict against a partial expectation.

Only keys present in the expectation are checked. "score" is a floor, every
other key is compared for equality. Keys may use the verdict field names or
the camelCase names of the model reply ("assertionsMet").
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

from imageassertions.core.models import ValidationVerdict


class MatchResult(NamedTuple):
    """Outcome of a match, with the message a test failure should show."""

    passed: bool
    message: str

    def __bool__(self) -> bool:
        return self.passed


_CAMEL_CASE_KEYS = {"assertionsMet": "assertions_met"}


def _field_matches(received: ValidationVerdict, key: str, value: Any) -> bool:
    if key == "assertions_met":
        return received.assertions_met == value
    if key == "score":
        return value is not None and received.score >= value
    if key == "tone":
        return received.tone == value
    return getattr(received, key) == value


def match_image_assertions(received: ValidationVerdict, expected: Mapping[str, Any]) -> MatchResult:
    """
    Check a verdict against a partial expected verdict.

    Args:
        received: Verdict returned by ImageValidator.validate
        expected: Subset of verdict fields; score is an inclusive minimum

    Returns:
        MatchResult; its message describes the opposite outcome, as shown when
        a positive or negated assertion fails
    """
    expected = {_CAMEL_CASE_KEYS.get(key, key): value for key, value in expected.items()}
    unknown = sorted(key for key in expected if key not in ValidationVerdict.model_fields)
    passed = not unknown and all(_field_matches(received, key, value) for key, value in expected.items())

    if passed:
        message = f"Expected {received!r} not to satisfy image assertions {expected!r}"
    else:
        message = f"Expected {received!r} to satisfy image assertions {expected!r}"
        if unknown:
            message += f" (unknown verdict fields: {', '.join(unknown)})"
    return MatchResult(passed, message)


def assert_satisfies_image_assertions(
    received: ValidationVerdict, expected: Mapping[str, Any] | None = None, **fields: Any
) -> None:
    """Raise AssertionError unless the verdict satisfies the expectation."""
    result = match_image_assertions(received, {**(expected or {}), **fields})
    if not result.passed:
        raise AssertionError(result.message)


def assert_not_satisfies_image_assertions(
    received: ValidationVerdict, expected: Mapping[str, Any] | None = None, **fields: Any
) -> None:
    """Raise AssertionError if the verdict satisfies the expectation."""
    result = match_image_assertions(received, {**(expected or {}), **fields})
    if result.passed:
        raise AssertionError(result.message)
