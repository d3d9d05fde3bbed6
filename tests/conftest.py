import logging

import pytest


@pytest.fixture(autouse=True)
def _vaultwatch_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="vaultwatch")
    yield
