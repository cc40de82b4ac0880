"""Pydantic models - Single source of truth for data structures.

Pydantic validates field types and ranges automatically and raises
pydantic.ValidationError on bad values.
"""

import base64
from enum import Enum
from typing import Annotated, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from imageassertions.core.config import config
from imageassertions.core.errors import InvalidInputError


class ImageTone(str, Enum):
    """Closed set of tone classifications the validation model may report."""

    DREAMY = "dreamy"
    PHOTO_REALISTIC = "photo-realistic"
    BLACK_AND_WHITE = "black-and-white"

    @property
    def definition(self) -> str:
        return TONE_DEFINITIONS[self]


TONE_DEFINITIONS = {
    ImageTone.DREAMY: (
        "surreal, soft, ethereal atmosphere; may appear otherworldly or hazy, not sharp or high contrast. "
        "Suitable for styles that evoke a calm or fantastical feeling."
    ),
    ImageTone.PHOTO_REALISTIC: "highly detailed and mimics real-world photography.",
    ImageTone.BLACK_AND_WHITE: "grayscale image with no color, may vary in tone depending on contrast and texture.",
}


# --- Generation ---------------------------------------------------------------


class ImageConfig(BaseModel):
    """Titan image generation parameters."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=1024, gt=0, description="Image width in pixels")
    height: int = Field(default=1024, gt=0, description="Image height in pixels")
    quality: Literal["standard", "premium"] = Field(default="premium", description="Quality tier")
    cfg_scale: float = Field(default=8.0, ge=1.0, le=10.0, description="Prompt adherence")
    seed: int | None = Field(default=None, ge=0, description="Random seed for reproducibility")


class GenerationRequest(BaseModel):
    """A single text-to-image request."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1, description="Description of the image to generate")
    model_id: str = Field(default_factory=lambda: config.generation_model_id, description="Bedrock model ID")
    region: str | None = Field(default=None, description="Override region for this call only")
    image_config: ImageConfig = Field(default_factory=ImageConfig)


class GenerationResult(BaseModel):
    """Image produced by a generation call."""

    model_config = ConfigDict(frozen=True)

    image_bytes: bytes
    base64_image: str
    model_id: str


# --- Validation ---------------------------------------------------------------


class RawImage(BaseModel):
    """Image given as raw bytes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bytes"] = "bytes"
    data: bytes

    def to_bytes(self) -> bytes:
        return self.data


class EncodedImage(BaseModel):
    """Image given as base64 text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["base64"] = "base64"
    data: str

    def to_bytes(self) -> bytes:
        """
        Decode the base64 text.

        Raises:
            InvalidInputError: If the text is not valid base64 or decodes to nothing
        """
        try:
            data = base64.b64decode(self.data, validate=True)
        except ValueError as e:
            raise InvalidInputError(f"base64_image is not valid base64: {e}") from e

        if not data:
            raise InvalidInputError("base64_image decodes to an empty image")
        return data


ImageSource = Annotated[RawImage | EncodedImage, Field(discriminator="kind")]


class ValidationRequest(BaseModel):
    """A single image-vs-assertion validation request."""

    model_config = ConfigDict(frozen=True)

    image: ImageSource
    assertion_prompt: str = Field(..., description="Natural-language assertion to check")
    model_id: str = Field(default_factory=lambda: config.validation_model_id, description="Bedrock model ID")
    confidence_threshold: float = Field(default=7, ge=0, le=10, description="Minimum score for a pass")
    temperature: float = Field(default=0.3, ge=0, le=1)
    top_p: float = Field(default=0.7, ge=0, le=1)
    max_tokens: int = Field(default=500, gt=0)

    @classmethod
    def build(
        cls,
        *,
        assertion_prompt: str | None,
        image_bytes: bytes | None = None,
        base64_image: str | None = None,
        **options,
    ) -> "ValidationRequest":
        """
        Build a request from the two optional image inputs.

        Raw bytes are preferred when both are given.

        Args:
            assertion_prompt: Assertion to validate against
            image_bytes: Raw image bytes
            base64_image: Base64-encoded image
            **options: model_id, confidence_threshold, temperature, top_p, max_tokens

        Returns:
            ValidationRequest

        Raises:
            InvalidInputError: If no image is given, the assertion is empty, or an option is out of range
        """
        if not image_bytes and not base64_image:
            raise InvalidInputError("Either image_bytes or base64_image must be provided")
        if not assertion_prompt:
            raise InvalidInputError("Assertion prompt is required")

        try:
            image = RawImage(data=image_bytes) if image_bytes else EncodedImage(data=base64_image)
            return cls(image=image, assertion_prompt=assertion_prompt, **options)
        except pydantic.ValidationError as e:
            raise InvalidInputError(f"Invalid validation request: {e}") from e


class ModelVerdict(BaseModel):
    """JSON object returned by the validation model, read by its camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    assertions_met: bool = Field(..., alias="assertionsMet")
    score: float
    tone: str | None = None
    explanation: str | None = None


class ValidationVerdict(BaseModel):
    """Final verdict after the confidence threshold is applied."""

    model_config = ConfigDict(frozen=True)

    assertions_met: bool
    score: float
    tone: ImageTone | str | None
    explanation: str | None
