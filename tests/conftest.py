"""Shared fixtures for the fan art tests."""

import logging
from io import BytesIO
from unittest.mock import MagicMock

import pytest
from PIL import Image

from src.tvdb.fanart import TvdbFanartBanner
from src.tvdb.links import TvdbLinks
from src.tvdb.models import TvdbLanguage


def make_image(color=(255, 0, 0), size=(4, 4)) -> Image.Image:
    return Image.new("RGB", size, color)


def png_bytes(color=(255, 0, 0), size=(4, 4)) -> bytes:
    buf = BytesIO()
    make_image(color, size).save(buf, format="PNG")
    return buf.getvalue()


def fake_response(content: bytes = b"", text: str = "", status_error: Exception = None) -> MagicMock:
    response = MagicMock()
    response.content = content
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def image():
    return make_image()


@pytest.fixture
def logger():
    return logging.getLogger("TvdbFanart.tests")


@pytest.fixture
def fanart():
    banner = TvdbFanartBanner(
        73739,
        "fanart/original/73739-1.jpg",
        TvdbLanguage.from_abbreviation("en"),
        links=TvdbLinks("https://tvdb.example"),
    )
    banner.thumb_path = "_cache/fanart/original/73739-1.jpg"
    banner.vignette_path = "fanart/vignette/73739-1.jpg"
    return banner
