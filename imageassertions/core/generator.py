"""Text-to-image generation.

Every failure is re-raised as GenerationError so callers handle one type.
"""

import base64
import json
import logging

from imageassertions.bedrock.client import BedrockClient
from imageassertions.core.errors import GenerationError
from imageassertions.core.models import GenerationRequest, GenerationResult, ImageConfig

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def build_generation_payload(prompt: str, image_config: ImageConfig) -> dict:
    """Titan Image Generator request body for a single image."""
    generation_config = {
        "numberOfImages": 1,
        "width": image_config.width,
        "height": image_config.height,
        "quality": image_config.quality,
        "cfgScale": image_config.cfg_scale,
    }
    if image_config.seed is not None:
        generation_config["seed"] = image_config.seed

    return {
        "taskType": "TEXT_IMAGE",
        "textToImageParams": {"text": prompt},
        "imageGenerationConfig": generation_config,
    }


class ImageGenerator:
    """Generates images with a Bedrock text-to-image model."""

    def __init__(self, client: BedrockClient | None = None, region: str | None = None):
        self.client = client or BedrockClient(region)
        self.region = self.client.region

    def _client_for(self, region: str | None) -> BedrockClient:
        if region is None or region == self.region:
            return self.client
        logger.info(f"Using region-scoped client for {region}")
        return BedrockClient(region)

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate one image from a text prompt.

        Args:
            request: Generation request

        Returns:
            GenerationResult with raw bytes and base64 text

        Raises:
            GenerationError: On any transport or response failure
        """
        client = self._client_for(request.region)
        payload = build_generation_payload(request.prompt, request.image_config)

        logger.info(f"Generating image with {request.model_id} in {client.region}")

        try:
            body = client.invoke_model(request.model_id, payload)
            if not body:
                raise GenerationError("No response body received from model")

            response = json.loads(body)
            images = response.get("images")
            if not images:
                raise GenerationError("No images returned from model")

            base64_image = images[0]
            if not base64_image:
                raise GenerationError("No image data found in response")

            image_bytes = base64.b64decode(base64_image)
        except Exception as e:
            logger.error(f"Image generation failed: {e}")
            raise GenerationError(f"Image generation failed: {e}") from e

        logger.info(f"Generated image: {len(image_bytes)} bytes")

        return GenerationResult(
            image_bytes=image_bytes,
            base64_image=base64_image,
            model_id=request.model_id,
        )
