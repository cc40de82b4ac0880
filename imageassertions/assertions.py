"""One-stop client for generating and validating images."""

import logging

import pydantic

from imageassertions.bedrock.client import BedrockClient
from imageassertions.core.errors import InvalidInputError
from imageassertions.core.generator import ImageGenerator
from imageassertions.core.models import (
    GenerationRequest,
    GenerationResult,
    ImageConfig,
    ValidationRequest,
    ValidationVerdict,
)
from imageassertions.core.validator import ImageValidator

logger = logging.getLogger(__name__)


class ImageAssertions:
    """Generates images and validates them against assertions."""

    def __init__(self, region: str | None = None):
        self.client = BedrockClient(region)
        self.region = self.client.region
        self.generator = ImageGenerator(self.client)
        self.validator = ImageValidator(self.client)

    def generate_image(
        self,
        prompt: str,
        model_id: str | None = None,
        region: str | None = None,
        image_config: ImageConfig | dict | None = None,
    ) -> GenerationResult:
        """
        Generate an image from a text prompt.

        Args:
            prompt: Description of the image
            model_id: Bedrock model ID (defaults to config.generation_model_id)
            region: Region for this call only (defaults to the client region)
            image_config: ImageConfig or dict of its fields

        Returns:
            GenerationResult

        Raises:
            InvalidInputError: If the prompt is empty or an image_config value is out of range
            GenerationError: If generation fails
        """
        options = {"prompt": prompt, "region": region}
        if model_id:
            options["model_id"] = model_id
        if image_config is not None:
            options["image_config"] = image_config

        try:
            request = GenerationRequest(**options)
        except pydantic.ValidationError as e:
            raise InvalidInputError(f"Invalid generation request: {e}") from e

        return self.generator.generate(request)

    def validate_image(
        self,
        *,
        assertion_prompt: str,
        image_bytes: bytes | None = None,
        base64_image: str | None = None,
        **options,
    ) -> ValidationVerdict:
        """
        Validate an image against an assertion.

        Args:
            assertion_prompt: Assertion to check
            image_bytes: Raw image bytes (preferred)
            base64_image: Base64-encoded image
            **options: model_id, confidence_threshold, temperature, top_p, max_tokens

        Returns:
            ValidationVerdict

        Raises:
            InvalidInputError: If no image or no assertion is given, or an option is out of range
            ValidationError: If the model reply cannot be parsed
        """
        request = ValidationRequest.build(
            assertion_prompt=assertion_prompt,
            image_bytes=image_bytes,
            base64_image=base64_image,
            **options,
        )
        return self.validator.validate(request)
