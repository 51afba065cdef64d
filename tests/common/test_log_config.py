"""Tests for giftlist/common/log_config.py"""

import logging
import sys

import pytest

from giftlist.common.log_config import HTTP_LOGGER, PACKAGE_LOGGER, setup_logging


def own_handlers(name):
    return [h for h in logging.getLogger(name).handlers if getattr(h, "_giftlist", False)]


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def reset_loggers(self):
        yield
        for name in (PACKAGE_LOGGER, HTTP_LOGGER):
            logger = logging.getLogger(name)
            for handler in own_handlers(name):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    @pytest.mark.parametrize("kwargs, level", [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
        ({"verbose": True, "quiet": True}, logging.DEBUG),
    ])
    def test_package_level(self, kwargs, level):
        setup_logging(**kwargs)
        assert logging.getLogger(PACKAGE_LOGGER).level == level

    def test_handler_writes_to_stderr(self):
        setup_logging()
        handlers = own_handlers(PACKAGE_LOGGER)
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_repeated_calls_keep_one_handler(self):
        setup_logging()
        setup_logging(quiet=True)
        assert len(own_handlers(PACKAGE_LOGGER)) == 1

    def test_verbose_routes_http_logging(self):
        setup_logging(verbose=True)
        http_logger = logging.getLogger(HTTP_LOGGER)
        assert http_logger.level == logging.DEBUG
        assert own_handlers(HTTP_LOGGER) == own_handlers(PACKAGE_LOGGER)

    def test_non_verbose_detaches_http_logging(self):
        setup_logging(verbose=True)
        setup_logging()
        assert own_handlers(HTTP_LOGGER) == []
        assert logging.getLogger(HTTP_LOGGER).level == logging.NOTSET

    def test_foreign_handlers_left_alone(self):
        foreign = logging.NullHandler()
        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.addHandler(foreign)
        try:
            setup_logging()
            setup_logging()
            assert foreign in logger.handlers
        finally:
            logger.removeHandler(foreign)
