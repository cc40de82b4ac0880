"""Error taxonomy.

All errors are terminal: nothing in this package retries.
"""


class ImageAssertionsError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(ImageAssertionsError):
    """Caller supplied an unusable request. Raised before any network call."""


class GenerationError(ImageAssertionsError):
    """Image generation failed (transport, empty or malformed response)."""


class ValidationError(ImageAssertionsError):
    """The validation reply could not be turned into a verdict.

    Not to be confused with ``pydantic.ValidationError``.
    """
