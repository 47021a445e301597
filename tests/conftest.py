import pytest

from velitherm import config


@pytest.fixture(autouse=True)
def _restore_options():
    token = config._options.set(config.DEFAULTS)
    yield
    config._options.reset(token)
