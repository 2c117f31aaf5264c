"""Tests for download configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from imgdl.cli.config import DownloadConfig, origin_of


def test_config_defaults():
    """Test default settings."""
    config = DownloadConfig(url="http://example.com/image.jpg")

    assert config.output == Path("output.jpg")
    assert config.timeout == 30
    assert config.chunk_size == 32 * 1024
    assert config.referer is None


@pytest.mark.parametrize(
    "field,value",
    [("timeout", 0), ("timeout", -1.5), ("chunk_size", 0), ("url", "")],
)
def test_config_rejects_invalid_values(field, value):
    """Test invalid settings raise a validation error."""
    kwargs = {"url": "http://example.com/image.jpg", field: value}
    with pytest.raises(ValidationError):
        DownloadConfig(**kwargs)


def test_config_is_frozen():
    """Test settings cannot change after creation."""
    config = DownloadConfig(url="http://example.com/image.jpg")
    with pytest.raises(ValidationError):
        config.url = "http://example.com/other.jpg"


def test_effective_referer():
    """Test the referer falls back to the URL origin."""
    config = DownloadConfig(url="https://img.example.com:8443/a/b.png")
    assert config.effective_referer == "https://img.example.com:8443/"

    config = DownloadConfig(url="https://img.example.com/a.png", referer="https://x.org/")
    assert config.effective_referer == "https://x.org/"


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://example.com/image.jpg", "http://example.com/"),
        ("https://example.com", "https://example.com/"),
        ("example.com/image.jpg", ""),
        ("not a url", ""),
    ],
)
def test_origin_of(url, expected):
    """Test origin extraction."""
    assert origin_of(url) == expected
