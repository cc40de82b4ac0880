"""Configuration management using Pydantic Settings.

Every field has a default, so importing the package never requires env vars.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ImageAssertionsConfig(BaseSettings):
    """Global configuration - loads from environment variables or .env file."""

    # AWS
    aws_region: str = Field(default="us-east-1", description="Default AWS region for Bedrock calls")

    # Models
    generation_model_id: str = Field(
        default="amazon.titan-image-generator-v2:0",
        description="Bedrock model used for text-to-image generation",
    )
    validation_model_id: str = Field(
        default="us.amazon.nova-premier-v1:0",
        description="Bedrock multimodal model used for image validation",
    )

    # Paths
    fixture_images_dir: str = Field(default="tests/images", description="Directory holding test fixture images")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton instance
config = ImageAssertionsConfig()
