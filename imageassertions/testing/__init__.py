"""Test helpers for image assertions."""

from imageassertions.core.matchers import (
    assert_not_satisfies_image_assertions,
    assert_satisfies_image_assertions,
    match_image_assertions,
)
from imageassertions.testing.fixtures import read_image_as_base64

__all__ = [
    "assert_not_satisfies_image_assertions",
    "assert_satisfies_image_assertions",
    "match_image_assertions",
    "read_image_as_base64",
]
