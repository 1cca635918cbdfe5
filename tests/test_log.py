"""Tests for loguru setup."""

from loguru import logger

from portfolio_options.log import setup_logging


def test_file_sink_receives_debug(tmp_path):
    log_file = tmp_path / "logs" / "alerts.log"

    setup_logging("WARNING", log_file)
    logger.debug("debug line")
    logger.warning("warning line")
    logger.remove()

    content = log_file.read_text()
    assert "debug line" in content
    assert "WARNING" in content


def test_stderr_level(capsys):
    setup_logging("WARNING")
    logger.info("hidden")
    logger.error("shown")
    logger.remove()

    err = capsys.readouterr().err
    assert "shown" in err
    assert "hidden" not in err
