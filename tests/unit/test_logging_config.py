import logging

from fakestore_lib.logging_config import configure_logging


def test_configure_logging_sets_level_and_single_handler():
    configure_logging('debug')
    assert logging.getLogger().level == logging.DEBUG
    configure_logging('INFO')
    assert logging.getLogger().level == logging.INFO
    assert len(logging.getLogger().handlers) == 1


def test_unknown_level_falls_back_to_warning():
    configure_logging('chatty')
    assert logging.getLogger().level == logging.WARNING
