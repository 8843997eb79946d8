import io
import json

import pytest

from bucketkit import log
from bucketkit.log import Level, Logger
from bucketkit.messages import ErrorMessage, TraceMessage


@pytest.mark.parametrize(
    "name, level",
    [("trace", Level.TRACE), ("debug", Level.DEBUG), ("info", Level.INFO), ("error", Level.ERROR), ("bogus", Level.INFO)],
)
def test_level_from_string(name, level):
    assert Level.from_string(name) is level


@pytest.mark.parametrize(
    "name, prefix",
    [("error", "ERROR "), ("debug", "DEBUG "), ("info", ""), ("trace", "")],
)
def test_level_prefixes(name, prefix):
    assert Level.from_string(name).prefix == prefix


def _logger(level="info", json_output=False):
    out, err = io.StringIO(), io.StringIO()
    return Logger(level, json_output, stdout=out, stderr=err), out, err


def test_info_goes_to_stdout():
    logger, out, err = _logger()
    logger.info(TraceMessage("hello"))
    assert out.getvalue() == "hello\n"
    assert err.getvalue() == ""


def test_lower_levels_are_dropped():
    logger, out, _ = _logger("info")
    logger.debug(TraceMessage("hidden"))
    logger.trace(TraceMessage("hidden"))
    assert out.getvalue() == ""


def test_debug_is_prefixed_when_enabled():
    logger, out, _ = _logger("debug")
    logger.debug(TraceMessage("shown"))
    assert out.getvalue() == "DEBUG shown\n"


def test_error_goes_to_stderr_with_prefix():
    logger, out, err = _logger()
    logger.error(ErrorMessage(err="no object found", command="rm nonexistentfile"))
    assert err.getvalue() == 'ERROR "rm nonexistentfile": no object found\n'
    assert out.getvalue() == ""


def test_json_output():
    logger, out, _ = _logger("info", json_output=True)
    logger.info(TraceMessage("hello"))
    assert json.loads(out.getvalue()) == {"message": "hello"}


def test_stat_ignores_level():
    logger, out, _ = _logger("error")
    logger.info(TraceMessage("dropped"))
    logger.stat(TraceMessage("kept"))
    assert out.getvalue() == "kept\n"


def test_closed_logger_refuses_messages():
    logger, _, _ = _logger()
    logger.close()
    with pytest.raises(RuntimeError):
        logger.info(TraceMessage("late"))


def test_module_level_logger(capsys):
    log.init("info", False)
    log.info(TraceMessage("global"))
    log.debug(TraceMessage("hidden"))
    log.error(ErrorMessage(err="boom"))
    log.close()
    captured = capsys.readouterr()
    assert captured.out == "global\n"
    assert captured.err == "ERROR boom\n"