import logging
import pytest

from dotflat.shared import logs
from dotflat.shared.logs import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]

    yield

    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize('level, expected', [
    ('DEBUG', logging.DEBUG),
    ('error', logging.ERROR),
    ('Info', logging.INFO),
])
def test_setup_logging_level(level, expected):
    setup_logging(level)
    assert logging.getLogger().level == expected


def test_setup_logging_env_level(monkeypatch):
    monkeypatch.setattr(logs, 'LOG_LEVEL', 'debug')

    setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_unknown_env_level(monkeypatch):
    monkeypatch.setattr(logs, 'LOG_LEVEL', 'verbose')

    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_unknown_level():
    setup_logging('loud')
    assert logging.getLogger().level == logging.WARNING
