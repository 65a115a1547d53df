import logging

from lipi.core.logging import configure_logging


def test_configure_logging_once(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    assert configure_logging("debug") is True
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert configure_logging() is False
    assert len(root.handlers) == 1
