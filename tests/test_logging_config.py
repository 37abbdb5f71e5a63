import io
import logging

import pytest

from Matrixarith import Matrix
from Matrixarith.logging_config import PACKAGE_LOGGER, reset_logging, setup_logging


@pytest.fixture
def package_logger():
    yield logging.getLogger(PACKAGE_LOGGER)
    reset_logging()


def test_setup_logging_defaults_to_debug(package_logger, capsys):
    logger = setup_logging()

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    Matrix.identity(2) @ Matrix.identity(2)

    out = capsys.readouterr().out
    assert "Matrixarith - DEBUG - Logging at DEBUG" in out
    assert "Matrixarith.highlevel - DEBUG - Multiplying 2x2 by 2x2 matrix" in out


def test_setup_logging_stream_and_level(package_logger):
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)

    Matrix.identity(2) @ Matrix.identity(2)

    assert stream.getvalue() == ""


def test_setup_logging_file(package_logger, tmp_path):
    log_file = tmp_path / "matrix.log"
    setup_logging(log_file=log_file, stream=io.StringIO())

    assert len(package_logger.handlers) == 2
    Matrix.identity(1) @ Matrix.identity(1)
    text = log_file.read_text(encoding="utf-8")
    assert f"also to {log_file}" in text
    assert "Multiplying 1x1 by 1x1 matrix" in text


def test_reconfiguring_closes_previous_file(package_logger, tmp_path):
    setup_logging(log_file=tmp_path / "first.log", stream=io.StringIO())
    (first,) = [
        h for h in package_logger.handlers if isinstance(h, logging.FileHandler)
    ]
    first_stream = first.stream

    setup_logging(log_file=tmp_path / "second.log", stream=io.StringIO())

    assert first_stream.closed
    assert first not in package_logger.handlers
    assert len(package_logger.handlers) == 2


def test_setup_logging_twice_does_not_duplicate_handlers(package_logger):
    setup_logging(stream=io.StringIO())
    setup_logging(stream=io.StringIO())
    assert len(package_logger.handlers) == 1


def test_reset_logging(package_logger, tmp_path):
    setup_logging(log_file=tmp_path / "matrix.log", stream=io.StringIO())
    file_stream = package_logger.handlers[1].stream

    reset_logging()

    assert package_logger.handlers == []
    assert package_logger.level == logging.NOTSET
    assert file_stream.closed
