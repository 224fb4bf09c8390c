import logging

import pytest

from feed_quiz.logging_config import setup_logging


@pytest.fixture
def clean_logger():
    yield
    logger = logging.getLogger("feed_quiz")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_console_handler_only(clean_logger):
    logger = setup_logging(logging.DEBUG)

    assert logger.name == "feed_quiz"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_duplicate_handlers(clean_logger):
    setup_logging()
    logger = setup_logging()

    assert len(logger.handlers) == 1


def test_file_handler_writes_log(tmp_path, clean_logger):
    log_file = tmp_path / "quiz.log"
    logger = setup_logging(logging.INFO, str(log_file))

    logging.getLogger("feed_quiz.engine").info("Round 1: Cow")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "Round 1: Cow" in log_file.read_text(encoding="utf-8")
