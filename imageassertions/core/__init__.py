"""Core business logic for image assertions."""

from imageassertions.core.config import config
from imageassertions.core.errors import GenerationError, ImageAssertionsError, InvalidInputError, ValidationError
from imageassertions.core.models import (
    GenerationRequest,
    GenerationResult,
    ImageConfig,
    ImageTone,
    ValidationRequest,
    ValidationVerdict,
)

__all__ = [
    "config",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "ImageAssertionsError",
    "ImageConfig",
    "ImageTone",
    "InvalidInputError",
    "ValidationError",
    "ValidationRequest",
    "ValidationVerdict",
]
