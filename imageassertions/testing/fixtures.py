"""Fixture image loading for tests."""

import base64
from pathlib import Path

from imageassertions.core.config import config


def read_image_as_base64(filename: str, images_dir: str | Path | None = None) -> str:
    """
    Read an image file and return its base64 text.

    Args:
        filename: File name inside the images directory
        images_dir: Directory to read from (defaults to config.fixture_images_dir)

    Returns:
        Base64-encoded file contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    image_path = Path(images_dir or config.fixture_images_dir) / filename
    return base64.b64encode(image_path.read_bytes()).decode("ascii")
