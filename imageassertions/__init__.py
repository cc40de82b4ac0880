"""image-assertions - Generate images and validate them against assertions with Amazon Bedrock."""

__version__ = "1.0.0"

from imageassertions.assertions import ImageAssertions
from imageassertions.core.config import config
from imageassertions.core.errors import GenerationError, ImageAssertionsError, InvalidInputError, ValidationError
from imageassertions.core.generator import ImageGenerator
from imageassertions.core.matchers import assert_satisfies_image_assertions, match_image_assertions
from imageassertions.core.models import (
    GenerationRequest,
    GenerationResult,
    ImageConfig,
    ImageTone,
    ValidationRequest,
    ValidationVerdict,
)
from imageassertions.core.validator import ImageValidator

__all__ = [
    "config",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "ImageAssertions",
    "ImageAssertionsError",
    "ImageConfig",
    "ImageGenerator",
    "ImageTone",
    "ImageValidator",
    "InvalidInputError",
    "ValidationError",
    "ValidationRequest",
    "ValidationVerdict",
    "assert_satisfies_image_assertions",
    "match_image_assertions",
    "__version__",
]
