"""Bedrock Runtime client wrapper.

NO try-catch blocks - let boto3 exceptions bubble up.
"""

import json

import boto3

from imageassertions.core.config import config


class BedrockClient:
    """High-level Bedrock Runtime operations."""

    def __init__(self, region: str | None = None):
        self.region = region or config.aws_region
        self.bedrock = boto3.client("bedrock-runtime", region_name=self.region)

    def invoke_model(self, model_id: str, body: dict) -> bytes | None:
        """
        Single-shot structured inference.

        Args:
            model_id: Bedrock model ID
            body: Provider-specific request payload, sent as JSON

        Returns:
            Raw response body, or None if the response carries none

        Raises:
            ClientError: If the InvokeModel call fails
        """
        response = self.bedrock.invoke_model(
            modelId=model_id,
            body=json.dumps(body),
            contentType="application/json",
            accept="application/json",
        )

        stream = response.get("body")
        if stream is None:
            return None
        return stream.read()

    def converse(self, model_id: str, messages: list[dict], inference_config: dict) -> dict:
        """
        Multi-part conversational inference.

        Args:
            model_id: Bedrock model ID
            messages: Converse messages (text and image content blocks)
            inference_config: temperature, topP, maxTokens

        Returns:
            Raw Converse response

        Raises:
            ClientError: If the Converse call fails
        """
        return self.bedrock.converse(
            modelId=model_id,
            messages=messages,
            inferenceConfig=inference_config,
        )
