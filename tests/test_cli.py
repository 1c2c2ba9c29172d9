"""Tests for the content-analyzer command line entry point."""

import json
import logging
from unittest.mock import patch

import pytest

from content_analysis import cli
from content_analysis.factory import build_pipeline
from content_analysis.config import Settings
from content_analysis.logging_config import setup_logging

from conftest import LONG_TEXT, FakeOCREngine, make_pdf


@pytest.fixture
def fake_pipeline():
    pipeline = build_pipeline(Settings(), ocr_engine=FakeOCREngine())
    with patch("content_analysis.cli.build_pipeline", return_value=pipeline), \
            patch("content_analysis.cli.setup_logging"):
        yield pipeline


class TestMain:
    def test_text_report(self, tmp_path, capsys, fake_pipeline):
        path = tmp_path / "post.pdf"
        path.write_bytes(make_pdf([LONG_TEXT]))

        assert cli.main([str(path)]) == 0

        out = capsys.readouterr().out
        assert "[ok]   post.pdf" in out
        assert "Engagement Score: 50%" in out
        assert "Add relevant hashtags to increase visibility" in out

    def test_json_output(self, tmp_path, capsys, fake_pipeline):
        good = tmp_path / "post.pdf"
        good.write_bytes(make_pdf([LONG_TEXT]))
        bad = tmp_path / "notes.txt"
        bad.write_bytes(b"hello there")

        assert cli.main([str(good), str(bad), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["summary"] == {"total_files": 2, "succeeded": 1, "failed": 1}
        assert data["analysis"]["score"] == 50
        assert data["documents"][1]["ok"] is False

    def test_no_text_exit_code(self, tmp_path, capsys, fake_pipeline):
        bad = tmp_path / "notes.txt"
        bad.write_bytes(b"hello there")
        assert cli.main([str(bad)]) == 1
        assert "No text could be extracted" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys, fake_pipeline):
        assert cli.main([str(tmp_path / "nope.pdf")]) == 2
        assert "File not found" in capsys.readouterr().err


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_lines_on_stderr(self, capsys):
        setup_logging(log_level="debug", log_format="json")
        logging.getLogger("content_analysis.test").info("Extracted %d characters", 42)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Extracted 42 characters"
        assert record["level"] == "info"
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="chatty", log_format="console")
        assert logging.getLogger().level == logging.INFO
