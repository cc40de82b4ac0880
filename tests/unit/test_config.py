"""Tests for imageassertions/core/config.py."""

from imageassertions.core.config import ImageAssertionsConfig


class TestImageAssertionsConfig:
    """Tests for ImageAssertionsConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("AWS_REGION", "GENERATION_MODEL_ID", "VALIDATION_MODEL_ID", "FIXTURE_IMAGES_DIR"):
            monkeypatch.delenv(name, raising=False)

        cfg = ImageAssertionsConfig(_env_file=None)

        assert cfg.aws_region == "us-east-1"
        assert cfg.generation_model_id == "amazon.titan-image-generator-v2:0"
        assert cfg.validation_model_id == "us.amazon.nova-premier-v1:0"
        assert cfg.fixture_images_dir == "tests/images"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "us-west-2")
        monkeypatch.setenv("VALIDATION_MODEL_ID", "us.amazon.nova-pro-v1:0")

        cfg = ImageAssertionsConfig(_env_file=None)

        assert cfg.aws_region == "us-west-2"
        assert cfg.validation_model_id == "us.amazon.nova-pro-v1:0"

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GENERATION_MODEL_ID", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("GENERATION_MODEL_ID=amazon.nova-canvas-v1:0\n")

        cfg = ImageAssertionsConfig(_env_file=env_file)

        assert cfg.generation_model_id == "amazon.nova-canvas-v1:0"
