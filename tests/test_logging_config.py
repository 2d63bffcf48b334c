import logging

from rich.logging import RichHandler

from identnorm.logging_config import LOGGER_NAME, get_logger, setup_logging


def test_get_logger_namespaces_names():
    assert get_logger("identnorm.core.config").name == "identnorm.core.config"
    assert get_logger("identnorm").name == "identnorm"
    assert get_logger("emitter").name == "identnorm.emitter"


def test_setup_logging_installs_rich_handler(identnorm_logger):
    logger = setup_logging(logging.DEBUG)
    assert logger is identnorm_logger
    assert logger.level == logging.DEBUG
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1


def test_setup_logging_replaces_handler(identnorm_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.INFO, use_rich=False)
    logger = logging.getLogger(LOGGER_NAME)
    assert not any(isinstance(h, RichHandler) for h in logger.handlers)
    stream_handlers = [
        h for h in logger.handlers if type(h) is logging.StreamHandler
    ]
    assert len(stream_handlers) == 1
