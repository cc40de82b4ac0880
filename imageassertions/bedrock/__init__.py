"""Amazon Bedrock Runtime access."""

from imageassertions.bedrock.client import BedrockClient

__all__ = ["BedrockClient"]
