"""Image validation against natural-language assertions.

Bedrock transport errors bubble up unwrapped. Anything wrong with the
model's reply raises ValidationError.
"""

import logging

import pydantic

from imageassertions.bedrock.client import BedrockClient
from imageassertions.core.errors import InvalidInputError, ValidationError
from imageassertions.core.models import ImageTone, ModelVerdict, ValidationRequest, ValidationVerdict
from imageassertions.core.parsing import parse_json_object
from imageassertions.core.prompts import build_validation_prompt

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

_KNOWN_TONES = {tone.value for tone in ImageTone}


def apply_confidence_threshold(model_verdict: ModelVerdict, threshold: float) -> ValidationVerdict:
    """
    Gate the model's own answer on its score.

    The tone is converted to ImageTone when it is one of the known values and
    passed through unchanged otherwise.
    """
    tone = ImageTone(model_verdict.tone) if model_verdict.tone in _KNOWN_TONES else model_verdict.tone

    return ValidationVerdict(
        assertions_met=model_verdict.score >= threshold and model_verdict.assertions_met,
        score=model_verdict.score,
        tone=tone,
        explanation=model_verdict.explanation,
    )


def first_text_block(response: dict) -> str | None:
    """Text of the first text content block in a Converse response."""
    content = response.get("output", {}).get("message", {}).get("content") or []
    for block in content:
        if block.get("text"):
            return block["text"]
    return None


class ImageValidator:
    """Scores an image against an assertion with a Bedrock multimodal model."""

    def __init__(self, client: BedrockClient | None = None):
        self.client = client or BedrockClient()

    def build_messages(self, request: ValidationRequest) -> list[dict]:
        """One user message: the evaluation prompt followed by the PNG image."""
        return [
            {
                "role": "user",
                "content": [
                    {"text": build_validation_prompt(request.assertion_prompt)},
                    {
                        "image": {
                            "format": "png",
                            "source": {"bytes": request.image.to_bytes()},
                        }
                    },
                ],
            }
        ]

    def validate(self, request: ValidationRequest) -> ValidationVerdict:
        """
        Validate an image against the request's assertion.

        Args:
            request: Validation request

        Returns:
            ValidationVerdict with the confidence threshold applied

        Raises:
            InvalidInputError: If the assertion is empty or the image cannot be decoded
            ValidationError: If the reply has no text, no JSON object, or malformed JSON
            ClientError: If the Converse call fails
        """
        if not request.assertion_prompt:
            raise InvalidInputError("Assertion prompt is required")

        messages = self.build_messages(request)
        inference_config = {
            "temperature": request.temperature,
            "topP": request.top_p,
            "maxTokens": request.max_tokens,
        }

        logger.info(f"Validating image with {request.model_id}")
        response = self.client.converse(request.model_id, messages, inference_config)

        text = first_text_block(response)
        if not text:
            logger.error("No text content in validation response")
            raise ValidationError("No validation output received from model")

        logger.debug(f"Validation response (first 500 chars): {text[:500]}")

        payload = parse_json_object(text)
        try:
            model_verdict = ModelVerdict.model_validate(payload)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Model response JSON has an unexpected shape: {e}") from e

        verdict = apply_confidence_threshold(model_verdict, request.confidence_threshold)
        logger.info(
            f"Verdict: score={verdict.score} threshold={request.confidence_threshold} "
            f"model_said={model_verdict.assertions_met} assertions_met={verdict.assertions_met}"
        )
        return verdict
