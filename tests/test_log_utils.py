"""Tests for logging setup."""

import logging

from bsp_dungeon.log_utils import ROOT_LOGGER, TopicFormatter, setup_logging


class TestSetupLogging:
    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging(logging.DEBUG)

        root_logger = logging.getLogger(ROOT_LOGGER)
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "dungeon.log"

        setup_logging(log_file=str(log_file))
        logging.getLogger(f"{ROOT_LOGGER}.partition").info("hello")
        for handler in logging.getLogger(ROOT_LOGGER).handlers:
            handler.flush()

        assert "hello" in log_file.read_text()
        setup_logging()


class TestTopicFormatter:
    def test_prefixes_every_line(self):
        record = logging.LogRecord(
            "bsp_dungeon.rooms", logging.INFO, __file__, 1, "one\ntwo", None, None
        )

        text = TopicFormatter().format(record)

        assert text.split("\n") == ["INFO :rooms      : one", "INFO :rooms      : two"]
