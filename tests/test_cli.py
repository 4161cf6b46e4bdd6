"""Tests for the viewer, the logger setup and the command line entry point."""

import json
import logging
from unittest.mock import patch

from rich.console import Console

import run
from src.gallery.viewer import FanartViewer
from src.tvdb.fanart import TvdbFanartBanner
from src.tvdb.models import RgbColor, Resolution
from src.utils.logger import get_logger, setup_logger

from .conftest import make_image
from .test_connector import BANNERS_XML


def _recording_console():
    return Console(record=True, width=200, color_system=None)


def test_viewer_lists_banners(logger):
    banner = TvdbFanartBanner(14820, "fanart/original/73739-1.jpg")
    banner.resolution = Resolution(1920, 1080)
    banner.colors = [RgbColor(68, 69, 59)]
    banner.thumb_path = "_cache/fanart/original/73739-1.jpg"
    banner.load_thumb_from_image(make_image())

    console = _recording_console()
    FanartViewer(logger, console).show([banner], 73739)
    output = console.export_text()

    assert "Fan art for series 73739" in output
    assert "14820" in output
    assert "1920x1080" in output
    assert "1 fan art entries, 1 thumbnails and 0 vignettes in memory" in output


def test_viewer_without_banners(logger):
    console = _recording_console()
    FanartViewer(logger, console).show([])
    assert "No fan art found" in console.export_text()


def test_setup_logger_is_idempotent(tmp_path):
    logger = setup_logger("TvdbFanartSetupTest", logs_dir=str(tmp_path))
    try:
        assert len(logger.handlers) == 2
        assert setup_logger("TvdbFanartSetupTest", logs_dir=str(tmp_path)) is logger
        assert len(logger.handlers) == 2
        assert list(tmp_path.glob("tvdb_fanart_*.log"))
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_child_loggers():
    assert get_logger().name == "TvdbFanart"
    assert get_logger("banner").name == "TvdbFanart.banner"


def _write_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        'tvdb': {'api_key': 'KEY', 'base_server': 'https://tvdb.example', 'min_request_interval': 0}
    }), encoding="utf-8")
    return str(path)


class FakeResponse:
    def __init__(self, text="", content=b""):
        self.text = text
        self.content = content

    def raise_for_status(self):
        pass


def test_main_loads_and_shows_fanart(tmp_path):
    def fake_get(url, timeout=None):
        if url.endswith("banners.xml"):
            return FakeResponse(text=BANNERS_XML)
        return FakeResponse()

    test_logger = logging.getLogger("TvdbFanart.tests.main")
    with patch("run.setup_logger", return_value=test_logger), \
            patch("requests.Session.get", side_effect=fake_get), \
            patch.object(TvdbFanartBanner, "load_image", return_value=make_image()) as mock_load, \
            patch("run.FanartViewer") as mock_viewer:
        code = run.main(["73739", "--config", _write_config(tmp_path), "--workers", "2"])

    assert code == 0
    assert mock_load.call_count == 2
    shown = mock_viewer.return_value.show.call_args.args[0]
    assert [b.id for b in shown] == [14821, 14820]
    assert all(b.is_thumb_loaded for b in shown)


def test_main_config_error(tmp_path):
    test_logger = logging.getLogger("TvdbFanart.tests.main")
    with patch("run.setup_logger", return_value=test_logger):
        assert run.main(["1", "--config", str(tmp_path / "missing.json")]) == 1


def test_main_connection_failure(tmp_path):
    test_logger = logging.getLogger("TvdbFanart.tests.main")
    with patch("run.setup_logger", return_value=test_logger), \
            patch("run.TvdbConnector.test_connection", return_value=False):
        assert run.main(["1", "--config", _write_config(tmp_path)]) == 1
