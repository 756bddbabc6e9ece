"""Tests for the command line front end"""

import logging
from unittest import mock

import pytest

from starschedules import main as cli
from starschedules.errors import TransportError

from .conftest import SAMPLE_MARKUP


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def post():
    with mock.patch("starschedules.main.ScheduleDownloader.post", return_value=SAMPLE_MARKUP) as patched:
        yield patched


def test_text_output(post, capsys):
    assert cli.main(["--channel", "news", "--year", "2011", "--month", "4", "--day", "12"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(" Time: 18:00\nTitle: Sample Show A\n-------------------\n")
    post.assert_called_once_with(
        "http://www.indya.com/uk/tvguide/tvguide.asp",
        {"ddChannelName": "STAR News", "ddDate": "12_04_2011"},
    )


def test_xml_output_to_file(post, tmp_path):
    output = tmp_path / "out" / "star.xml"
    assert cli.main(["-c", "PLUS", "--format", "xml", "--output", str(output)]) == 0
    xml = output.read_text(encoding="utf-8")
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<programmes>\n')
    assert post.call_args[0][1]["ddChannelName"] == "STAR Plus"


def test_partial_date_is_usage_error(post):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--year", "2011"])
    assert excinfo.value.code == 2
    post.assert_not_called()


def test_unknown_channel_is_usage_error(post):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--channel", "star"])
    assert excinfo.value.code == 2


def test_invalid_date_exits_with_error(post, capsys):
    assert cli.main(["--year", "2011", "--month", "13", "--day", "1"]) == 1
    assert "Invalid month [13]" in capsys.readouterr().err
    post.assert_not_called()


def test_transport_error_exits_with_error(post, capsys):
    post.side_effect = TransportError("http://www.indya.com/uk/tvguide/tvguide.asp", "HTTP 500")
    assert cli.main([]) == 1
    assert "Couldn't connect to" in capsys.readouterr().err


def test_list_channels(capsys):
    assert cli.main(["--list-channels"]) == 0
    out = capsys.readouterr().out
    assert "news   STAR News" in out
    assert len(out.splitlines()) == 4


def test_log_file(post, tmp_path):
    log_file = tmp_path / "logs" / "starschedules.log"
    assert cli.main(["--debug", "--log-file", str(log_file), "--output", str(tmp_path / "x.txt")]) == 0
    assert "Fetch programmes listing for channel [news]" in log_file.read_text(encoding="utf-8")
