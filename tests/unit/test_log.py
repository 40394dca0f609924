import re
from io import StringIO

import pytest
from colorama import Fore, Style
from mozlog.structuredlog import StructuredLogger

from fiddlebisect import log


def init_logger(mocker, **kwargs):
    stream = StringIO()
    kwargs["output"] = stream
    mocker.patch("fiddlebisect.log.set_default_logger")
    return log.init_logger(**kwargs), stream


def test_logger_without_color(mocker):
    logger, stream = init_logger(mocker, allow_color=False)
    logger.error("argh")
    assert "ERROR: argh" in stream.getvalue()


def test_logger_with_color(mocker):
    logger, stream = init_logger(mocker, allow_color=True)
    logger.error("argh")
    assert re.search(".+ERROR.+: argh", stream.getvalue())


@pytest.mark.parametrize("debug", [False, True])
def test_logger_debug(mocker, debug):
    logger, stream = init_logger(mocker, allow_color=False, debug=debug)
    logger.info("info")
    logger.debug("debug")
    data = stream.getvalue()
    assert "info" in data
    if debug:
        assert "debug" in data
    else:
        assert "debug" not in data


@pytest.mark.parametrize("debug", [False, True])
def test_logger_component(mocker, debug):
    logger, stream = init_logger(mocker, allow_color=False, debug=debug)
    StructuredLogger(logger.name, component="Autobisect").info("checking 2.0.0")
    if debug:
        assert "INFO: [Autobisect] checking 2.0.0" in stream.getvalue()
    else:
        assert "INFO: checking 2.0.0" in stream.getvalue()


def test_output_sink(mocker):
    logger = mocker.Mock()
    mocker.patch("fiddlebisect.log.get_proxy_logger", return_value=logger)
    push_output = log.output_sink("Autobisect")
    push_output("a line")
    push_output("")
    logger.info.assert_called_once_with("a line")


def test_output_sink_splits_lines(mocker):
    logger = mocker.Mock()
    mocker.patch("fiddlebisect.log.get_proxy_logger", return_value=logger)
    push_output = log.output_sink("Test Runner")
    push_output("first line\r\n\n  second line  \n")
    push_output(None)
    assert logger.info.call_args_list == [mocker.call("first line"), mocker.call("  second line")]


def test_output_sink_level(mocker):
    logger = mocker.Mock()
    mocker.patch("fiddlebisect.log.get_proxy_logger", return_value=logger)
    log.output_sink("Bisect", level="debug")("a line")
    logger.debug.assert_called_once_with("a line")
    assert not logger.info.called


def test_colorize():
    assert log.colorize("stuff", allow_color=True) == "stuff"
    assert log.colorize("{fRED}stuff{sRESET_ALL}", allow_color=True) == (
        Fore.RED + "stuff" + Style.RESET_ALL
    )
    assert log.colorize("{fRED}stuf{sRESET_ALL}", allow_color=False) == "stuf"
