"""Shared pytest fixtures."""

import base64
import io
import json
import os

import pytest
from botocore.response import StreamingBody

# Set environment before importing imageassertions modules
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from imageassertions.bedrock.client import BedrockClient  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake png content"


def _converse_response(text: str | None) -> dict:
    """Build a Converse API response carrying one text block."""
    content = [] if text is None else [{"text": text}]
    return {
        "output": {"message": {"role": "assistant", "content": content}},
        "stopReason": "end_turn",
    }


def _verdict_json(assertions_met=True, score=9, tone="photo-realistic", explanation="An orange cat on a windowsill."):
    return json.dumps(
        {
            "assertionsMet": assertions_met,
            "score": score,
            "tone": tone,
            "explanation": explanation,
        }
    )


def _invoke_response(payload: dict | bytes) -> dict:
    """Build an InvokeModel API response with a streaming body."""
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    return {"body": StreamingBody(io.BytesIO(raw), len(raw)), "contentType": "application/json"}


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def png_base64():
    return base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def mock_bedrock(mocker):
    """BedrockClient whose boto3 client is a MagicMock."""
    mock_client = mocker.MagicMock()
    mocker.patch("imageassertions.bedrock.client.boto3.client", return_value=mock_client)
    client = BedrockClient("us-east-1")
    return client, mock_client


@pytest.fixture
def images_dir(tmp_path):
    """Directory with a fixture PNG in it."""
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "cat.png").write_bytes(PNG_BYTES)
    return directory


@pytest.fixture(autouse=True)
def reset_env():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def converse_response():
    """Factory for Converse responses."""
    return _converse_response


@pytest.fixture
def invoke_response():
    """Factory for InvokeModel responses."""
    return _invoke_response


@pytest.fixture
def verdict_json():
    """Factory for the model's JSON verdict text."""
    return _verdict_json


def pytest_collection_modifyitems(config, items):
    """Skip live Bedrock tests unless RUN_BEDROCK_TESTS is set."""
    if os.environ.get("RUN_BEDROCK_TESTS"):
        return
    skip_live = pytest.mark.skip(reason="set RUN_BEDROCK_TESTS=1 to call Amazon Bedrock")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)
