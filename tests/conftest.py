import logging

import pytest

from identnorm.core import Namer, NamingConfig, create_template_engine


@pytest.fixture
def namer():
    return Namer()


@pytest.fixture
def rustc_namer():
    return Namer(NamingConfig(nonstandard=True))


@pytest.fixture
def engine(namer):
    return create_template_engine(namer=namer)


@pytest.fixture
def identnorm_logger():
    logger = logging.getLogger("identnorm")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
